# common/config.py

import os
from functools import lru_cache
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.logger import get_logger

logger = get_logger("config")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(os.path.dirname(__file__), "..", ".env"),
        env_file_encoding="utf-8",
        extra="ignore",  # 정의되지 않은 환경변수 무시
    )

    # 외부 로그 스토어 (Supabase / PostgREST)
    supabase_url: str = Field(..., description="SUPABASE_URL")
    supabase_key: str = Field(..., description="SUPABASE_KEY")
    supabase_table: str = "logs"
    supabase_timeout: Optional[float] = None  # 미설정 시 타임아웃 없음

    host: str = "0.0.0.0"
    port: int = 3000

    # 정적 파일 + 데이터셋(regions/pois/courses.json) 위치
    public_dir: str = "public"

    timezone: str = "Asia/Tokyo"

    log_level: str = "INFO"
    log_json_format: bool = False

    app_name: str = "Tour Backend"
    debug: bool = False

    # "*" 또는 콤마 구분 문자열
    cors_origins: str = "*"

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, v: str) -> str:
        # 잘못된 값이면 요청 처리 중이 아니라 기동 시점에 실패
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"알 수 없는 타임존: {v}") from e
        return v

    def parsed_cors(self) -> List[str]:
        if not self.cors_origins or self.cors_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    logger.debug("환경 변수에서 애플리케이션 설정 로드 중")
    try:
        settings = Settings()
        logger.info(f"설정 로드 완료: 앱명={settings.app_name}, 디버그={settings.debug}, 포트={settings.port}")
        logger.debug(f"로그 스토어 설정됨: url={settings.supabase_url}, table={settings.supabase_table}")
        return settings
    except Exception as e:
        logger.error(f"설정 로드 실패: {str(e)}")
        raise
