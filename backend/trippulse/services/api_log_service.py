"""Append-only log of outbound (mock) API calls."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trippulse.models.api_log import ApiLog

logger = logging.getLogger(__name__)


class ApiLogService:
    async def log_call(
        self,
        db: AsyncSession,
        endpoint: str,
        method: str,
        status_code: int,
        duration_ms: int,
        request_body: dict | None = None,
        response_body: dict | None = None,
        error_message: str | None = None,
    ) -> None:
        """Write one log row. A failed write is logged and never raised."""
        try:
            db.add(
                ApiLog(
                    endpoint=endpoint,
                    method=method,
                    status_code=status_code,
                    request_body=request_body,
                    response_body=response_body,
                    error_message=error_message,
                    duration_ms=duration_ms,
                )
            )
            await db.commit()
        except Exception as e:
            logger.warning(f"Failed to log API call to {endpoint}: {e}")
            await db.rollback()

    async def recent(self, db: AsyncSession, limit: int = 50) -> list[ApiLog]:
        result = await db.execute(
            select(ApiLog).order_by(ApiLog.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())


api_log_service = ApiLogService()
