"""
gateway/main.py
---------------
서버 진입점.
데이터셋 API, 행동 로그 API, 정적 파일/SPA 폴백을 하나의 FastAPI 앱으로 묶는다.
- 로그 스토어 클라이언트와 데이터셋은 앱 생성 시 한 번 만들어 app.state로 주입
"""
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from common.config import Settings, get_settings
from common.database.supabase_log import SupabaseLogStore
from common.logger import configure_logging, get_logger_from_env
from services.catalog.crud.catalog_crud import CatalogStore, load_catalog
from services.catalog.routers.catalog_router import router as catalog_router
from services.log.routers.log_router import router as log_router
from services.web.routers.static_router import router as static_router

logger = get_logger_from_env("gateway")


def create_app(
    settings: Optional[Settings] = None,
    log_store: Optional[SupabaseLogStore] = None,
    catalog: Optional[CatalogStore] = None,
) -> FastAPI:
    """
    FastAPI 앱 생성
    - log_store / catalog 를 넘기면 그대로 사용 (테스트용 주입)
    """
    if settings is None:
        settings = get_settings()
    configure_logging(settings.log_level, settings.log_json_format)

    public_dir = Path(settings.public_dir)
    if catalog is None:
        catalog = load_catalog(public_dir)
    if log_store is None:
        log_store = SupabaseLogStore(
            settings.supabase_url,
            settings.supabase_key,
            table=settings.supabase_table,
            timeout=settings.supabase_timeout,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"서버 기동: http://localhost:{settings.port}")
        yield
        await app.state.log_store.aclose()

    logger.info(f"FastAPI 애플리케이션 생성: 제목={settings.app_name}, 디버그={settings.debug}")
    app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

    app.state.settings = settings
    app.state.log_store = log_store
    app.state.catalog = catalog
    app.state.public_dir = public_dir
    app.state.timezone = settings.timezone

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router)
    app.include_router(log_router)
    # 전체 매칭이므로 반드시 마지막
    app.include_router(static_router)
    logger.info("라우터 등록 완료: catalog, log, static(SPA 폴백)")

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
