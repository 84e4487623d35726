"""
행동 로그 적재 API 라우터
- 프론트엔드의 조회/선택 이벤트를 외부 로그 스토어에 기록
"""
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from fastapi.responses import JSONResponse

from common.database.supabase_log import SupabaseLogStore, get_log_store
from common.errors import LogStoreError
from services.log.crud.log_crud import create_log
from services.log.schemas.log_schema import LogEventCreate, LogWriteResponse

router = APIRouter(prefix="/api/log", tags=["Log"])


@router.get("/health")
async def health_check():
    """
    로그 서비스 헬스체크
    """
    return {
        "status": "healthy",
        "service": "log",
        "message": "로그 서비스가 정상적으로 작동 중입니다.",
    }


@router.post(
    "",
    response_model=LogWriteResponse,
    response_model_exclude_none=True,
    responses={500: {"model": LogWriteResponse}},
)
async def write_log(
    request: Request,
    body: Any = Body(None),
    store: SupabaseLogStore = Depends(get_log_store),
):
    """
    행동 로그 적재
    - 필드 누락은 허용 (null로 저장)
    - 객체가 아닌 JSON(배열, 문자열 등)도 거부하지 않고 빈 이벤트로 처리
    - 스토어 실패 시 500 + 원인 메시지, 재시도 없음
    """
    event = LogEventCreate.model_validate(body if isinstance(body, dict) else {})
    try:
        await create_log(store, event, tz_name=request.app.state.timezone)
    except LogStoreError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=LogWriteResponse(status="error", error=e.message).model_dump(),
        )
    return LogWriteResponse(status="ok")
