import uuid
from datetime import datetime

from pydantic import BaseModel


class ApiLogResponse(BaseModel):
    id: uuid.UUID
    endpoint: str
    method: str
    status_code: int | None
    request_body: dict | None
    response_body: dict | None
    error_message: str | None
    duration_ms: int | None
    created_at: datetime

    model_config = {"from_attributes": True}
