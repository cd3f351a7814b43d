from datetime import datetime

from pydantic import BaseModel, ConfigDict

GREETING = "Hello from Kubernetes!"


class InfoResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "go-demo-app",
                "version": "1.0.0",
                "hostname": "go-demo-app-7d9f8c6b5-x2kqp",
                "timestamp": "2026-10-19T12:00:00.123456Z",
                "message": GREETING,
            }
        }
    )

    name: str
    version: str
    hostname: str  # "" when the OS cannot report one
    timestamp: datetime
    message: str = GREETING
