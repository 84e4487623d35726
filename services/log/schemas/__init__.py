"""
로그 서비스 스키마 모듈
"""
from .log_schema import LogEventCreate, LogWriteResponse, PersistedLogRecord

__all__ = [
    "LogEventCreate",
    "PersistedLogRecord",
    "LogWriteResponse",
]
