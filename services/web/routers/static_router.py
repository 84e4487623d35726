"""
정적 파일 + SPA 폴백 라우터
- public 디렉터리에 있는 파일은 그대로 제공
- 그 외 모든 GET 경로는 index.html 반환 (가장 마지막에 등록해야 함)
"""
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from common.errors import NotFoundException
from common.logger import get_logger

logger = get_logger("static_router")

router = APIRouter(tags=["Web"])

INDEX_FILE = "index.html"


def resolve_static_path(public_dir: Path, full_path: str) -> Path:
    """
    요청 경로를 public 디렉터리 안의 파일로 변환
    - 디렉터리면 그 안의 index.html
    - 디렉터리 밖을 가리키거나 파일이 없으면 루트 index.html
    """
    root = public_dir.resolve()
    if full_path:
        candidate = (root / full_path).resolve()
        if candidate.is_relative_to(root):
            if candidate.is_dir():
                candidate = candidate / INDEX_FILE
            if candidate.is_file():
                return candidate
    return root / INDEX_FILE


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, request: Request):
    target = resolve_static_path(request.app.state.public_dir, full_path)
    if not target.is_file():
        logger.error(f"셸 페이지 없음: {target}")
        raise NotFoundException(INDEX_FILE)
    return FileResponse(target)
