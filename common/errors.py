# errors.py
"""
공통 에러 타입 정의
"""
from fastapi import HTTPException, status


class LogStoreError(Exception):
    """
    외부 로그 스토어 insert 실패
    - 네트워크/인증/제약조건 위반 등을 구분하지 않고 메시지만 전달
    """
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CatalogLoadError(Exception):
    """데이터셋 문서 로드 실패 (시작 시 빈 컬렉션으로 대체됨)"""
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NotFoundException(HTTPException):
    """404 에러 - 항목 없음"""
    def __init__(self, name: str = "데이터"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=f"{name}을(를) 찾을 수 없습니다.")
