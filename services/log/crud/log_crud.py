"""
행동 로그 적재 함수
- 클라이언트 timestamp는 버리고 서버 시각(Asia/Tokyo)으로 덮어씀
- 스토어 insert는 요청당 1회, 실패 시 에러를 그대로 올림
"""
from common.database.supabase_log import SupabaseLogStore
from common.errors import LogStoreError
from common.logger import get_logger, log_with_context
from common.utils import DEFAULT_TIMEZONE, now_str
from services.log.schemas.log_schema import LogEventCreate, PersistedLogRecord

logger = get_logger("log_crud")


async def create_log(
    store: SupabaseLogStore,
    event: LogEventCreate,
    tz_name: str = DEFAULT_TIMEZONE,
) -> PersistedLogRecord:
    """
    행동 로그 한 건 생성(적재)
    """
    record = PersistedLogRecord(
        user_id=event.user_id,
        action=event.action,
        spot_id=event.spot_id,
        timestamp=now_str(tz_name),
    )
    logger.info(f"[수신] action={record.action}, timestamp={record.timestamp}")

    try:
        await store.insert(record.model_dump())
    except LogStoreError as e:
        log_with_context(
            logger, "ERROR", f"[DB 저장 실패] {e.message}",
            **record.model_dump(), error=e.message,
        )
        raise

    logger.info(f"[DB 저장 성공] user_id={record.user_id}, action={record.action}")
    return record
