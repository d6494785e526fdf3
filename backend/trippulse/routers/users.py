from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.database import get_db
from trippulse.dependencies import get_current_user
from trippulse.models.user import User
from trippulse.schemas.auth import UserResponse, UserSettingsRequest

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_current_user_profile(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)


@router.patch("/me/settings", response_model=UserResponse)
async def update_settings(
    req: UserSettingsRequest,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Update the current user's language and currency."""
    if req.preferred_language is not None:
        user.preferred_language = req.preferred_language
    if req.preferred_currency is not None:
        user.preferred_currency = req.preferred_currency.upper()
    await db.commit()
    await db.refresh(user)
    return UserResponse.model_validate(user)
