"""
행동 로그 요청/저장/응답 스키마
"""
import json
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogEventCreate(BaseModel):
    """
    프론트엔드가 보내는 행동 로그
    - userId / action / spotId 만 인식, 나머지 필드(timestamp 포함)는 무시
    - 누락된 필드는 None으로 두고 거부하지 않음
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    user_id: Optional[str] = Field(None, alias="userId")
    action: Optional[str] = None
    spot_id: Optional[str] = Field(None, alias="spotId")

    @field_validator("user_id", "action", "spot_id", mode="before")
    @classmethod
    def _to_text(cls, v: Any) -> Optional[str]:
        # 숫자 id 등도 거부하지 않고 문자열 컬럼에 맞춰 변환
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return json.dumps(v, ensure_ascii=False)
        return str(v)


class PersistedLogRecord(BaseModel):
    """logs 테이블에 적재되는 행 (컬럼 4개)"""
    user_id: Optional[str] = None
    action: Optional[str] = None
    spot_id: Optional[str] = None
    timestamp: str  # 서버에서 계산한 Asia/Tokyo 기준 시각


class LogWriteResponse(BaseModel):
    status: Literal["ok", "error"]
    error: Optional[str] = None
