"""
로그 서비스 CRUD 모듈
"""
from .log_crud import create_log

__all__ = ["create_log"]
