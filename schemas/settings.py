from datetime import datetime, timezone
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_serializer


class SettingResponse(BaseModel):
    uid: str
    # Opaque JSON value: object, array or scalar
    data: Any = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def serialize_utc(self, value: datetime) -> str:
        # SQLite hands back naive values; stored timestamps are always UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat()


class PaginationInfo(BaseModel):
    page: int
    limit: int
    total_count: int
    total_pages: int


class SettingListResponse(BaseModel):
    data: List[SettingResponse]
    pagination: PaginationInfo


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
