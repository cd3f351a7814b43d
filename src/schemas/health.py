from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "uptime": "3m7.25s",
                "checked": "2026-10-19T12:00:00.123456Z",
            }
        }
    )

    status: Literal["healthy"] = "healthy"
    uptime: str  # Go duration text, e.g. "1h0m0s"
    checked: datetime


class ReadyResponse(BaseModel):
    model_config = ConfigDict(json_schema_extra={"example": {"status": "ready"}})

    status: Literal["ready"] = "ready"
