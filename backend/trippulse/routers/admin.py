from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.database import get_db
from trippulse.dependencies import require_admin
from trippulse.models.user import User
from trippulse.schemas.admin import ApiLogResponse
from trippulse.services.api_log_service import api_log_service

router = APIRouter()


@router.get("/logs", response_model=list[ApiLogResponse])
async def recent_api_logs(
    limit: int = Query(50, ge=1, le=200),
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_admin),
):
    logs = await api_log_service.recent(db, limit)
    return [ApiLogResponse.model_validate(log) for log in logs]
