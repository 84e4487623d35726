"""
정적 파일/SPA 라우터 모듈
"""
from .static_router import router as static_router

__all__ = ["static_router"]
