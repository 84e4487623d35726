"""
Supabase(PostgREST) 로그 스토어 클라이언트
- 앱 시작 시 한 번 생성해서 app.state에 보관, 요청마다 의존성으로 주입
- insert 1회 = 원격 왕복 1회 (재시도/버퍼링 없음)
"""
import json
from typing import Any, Dict, Optional

import httpx
from fastapi import Request

from common.errors import LogStoreError
from common.logger import get_logger

logger = get_logger("supabase_log")


class SupabaseLogStore:
    """외부 로그 테이블에 행을 추가하는 얇은 어댑터"""

    def __init__(
        self,
        url: str,
        key: str,
        table: str = "logs",
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not url or not key:
            raise ValueError("supabase url과 key는 필수입니다.")
        self.table = table
        self.base_url = url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            headers=self._build_headers(key),
            timeout=timeout,
            transport=transport,
        )
        logger.info(f"Supabase 로그 스토어 클라이언트 생성: url={self.base_url}, table={table}")

    @staticmethod
    def _build_headers(key: str) -> Dict[str, str]:
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Content-Type": "application/json",
            "Prefer": "return=minimal",
        }

    async def insert(self, record: Dict[str, Any]) -> None:
        """
        로그 한 건 insert
        - 전송 실패/4xx/5xx 모두 LogStoreError 하나로 올림
        """
        try:
            resp = await self._client.post(f"/{self.table}", json=record)
        except httpx.HTTPError as e:
            raise LogStoreError(str(e) or e.__class__.__name__) from e

        if resp.is_success:
            return
        raise LogStoreError(_error_message(resp))

    async def aclose(self) -> None:
        await self._client.aclose()
        logger.info("Supabase 로그 스토어 클라이언트 종료")


def _error_message(resp: httpx.Response) -> str:
    """
    PostgREST 에러 바디에서 사람이 읽을 수 있는 메시지 추출
    - JSON이면 message 필드, 아니면 text 앞부분
    """
    body_preview = ""
    try:
        if "application/json" in (resp.headers.get("content-type") or ""):
            body = resp.json()
            if isinstance(body, dict) and body.get("message"):
                return str(body["message"])
            body_preview = json.dumps(body, ensure_ascii=False)[:2000]
        else:
            body_preview = (resp.text or "")[:2000]
    except ValueError:
        body_preview = "<body parse failed>"

    return body_preview or f"HTTP {resp.status_code}"


def get_log_store(request: Request) -> SupabaseLogStore:
    """앱 시작 시 주입된 로그 스토어 반환"""
    return request.app.state.log_store
