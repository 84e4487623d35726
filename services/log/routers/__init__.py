"""
로그 서비스 라우터 모듈
"""
from .log_router import router as log_router

__all__ = ["log_router"]
