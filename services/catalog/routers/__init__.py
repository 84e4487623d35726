"""
데이터셋 서비스 라우터 모듈
"""
from .catalog_router import router as catalog_router

__all__ = ["catalog_router"]
