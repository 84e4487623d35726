import json
import os

os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")

import httpx
import pytest
from fastapi.testclient import TestClient

from common.config import Settings
from common.database.supabase_log import SupabaseLogStore
from gateway.main import create_app
from services.catalog.crud.catalog_crud import load_catalog

SUPABASE_URL = "https://example.supabase.co"


class StoreRecorder:
    """MockTransport 핸들러: 받은 insert 요청을 기록하고 지정한 응답을 돌려줌"""

    def __init__(self):
        self.requests = []
        self.response = httpx.Response(201)
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def rows(self):
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def recorder():
    return StoreRecorder()


@pytest.fixture
def log_store(recorder):
    return SupabaseLogStore(SUPABASE_URL, "test-key", transport=httpx.MockTransport(recorder))


@pytest.fixture
def public_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>shell</body></html>", encoding="utf-8")
    (tmp_path / "regions.json").write_text('[{"id":"r1"}]', encoding="utf-8")
    (tmp_path / "pois.json").write_text('[{"id": "p1", "name": "浅草寺"}]', encoding="utf-8")
    # courses.json 없음 → 빈 배열로 대체
    return tmp_path


@pytest.fixture
def settings(public_dir):
    return Settings(supabase_url=SUPABASE_URL, supabase_key="test-key", public_dir=str(public_dir))


@pytest.fixture
def app(settings, log_store, public_dir):
    return create_app(settings, log_store=log_store, catalog=load_catalog(public_dir))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
