from .common import ErrorCode, ErrorDetail, ErrorResponse
from .health import HealthResponse, ReadyResponse
from .info import GREETING, InfoResponse

__all__ = [
    # common
    "ErrorDetail",
    "ErrorCode",
    "ErrorResponse",
    # health
    "HealthResponse",
    "ReadyResponse",
    # info
    "GREETING",
    "InfoResponse",
]
