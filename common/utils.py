# utils.py
"""
공통 유틸 함수 모음 (날짜 문자열 등)
"""
from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

DEFAULT_TIMEZONE = "Asia/Tokyo"
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def now_str(tz_name: str = DEFAULT_TIMEZONE, now: Optional[datetime] = None) -> str:
    """
    현재 시각을 고정 타임존/고정 포맷 문자열로 반환
    - 포맷: YYYY/MM/DD HH:MM:SS (24시간, 0 채움)
    - 서버 로컬 타임존과 무관하게 tz_name 기준으로 변환
    - now가 naive datetime이면 UTC로 간주
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(ZoneInfo(tz_name)).strftime(TIMESTAMP_FORMAT)
