"""
데이터셋 로드/조회 함수
- regions.json / pois.json / courses.json 을 시작 시 한 번만 읽음
- 읽기 실패 시 빈 배열로 대체 (호출자 입장에서 '원래 비어 있음'과 구분 불가)
"""
import json
from pathlib import Path
from typing import Dict, Union

from common.errors import CatalogLoadError
from common.logger import get_logger
from services.catalog.schemas.catalog_schema import CatalogDocument, CatalogKind

logger = get_logger("catalog_crud")


class CatalogStore:
    """읽기 전용 데이터셋 보관소"""

    def __init__(self, documents: Dict[CatalogKind, CatalogDocument]):
        self._documents = {kind: documents.get(kind) or CatalogDocument.empty(kind) for kind in CatalogKind}

    def get(self, kind: CatalogKind) -> CatalogDocument:
        return self._documents[kind]


def read_document(path: Path, kind: CatalogKind) -> CatalogDocument:
    """
    데이터셋 문서 하나 읽기
    - 파일 없음/JSON 파싱 실패 시 CatalogLoadError
    """
    try:
        body = path.read_bytes()
    except OSError as e:
        raise CatalogLoadError(str(path), e.strerror or str(e)) from e

    try:
        data = json.loads(body)
    except ValueError as e:
        raise CatalogLoadError(str(path), f"JSON 파싱 실패: {e}") from e

    items = tuple(data) if isinstance(data, list) else (data,)
    return CatalogDocument(kind=kind, body=body, items=items)


def load_catalog(data_dir: Union[str, Path]) -> CatalogStore:
    """
    세 데이터셋 로드
    - 종류별로 독립적으로 실패 처리
    """
    data_dir = Path(data_dir)
    documents: Dict[CatalogKind, CatalogDocument] = {}

    for kind in CatalogKind:
        try:
            documents[kind] = read_document(data_dir / kind.filename, kind)
            logger.info(f"데이터셋 로드 완료: {kind.value} ({len(documents[kind].items)}건)")
        except CatalogLoadError as e:
            logger.warning(f"데이터 읽기 오류, 빈 배열로 대체: {e}")
            documents[kind] = CatalogDocument.empty(kind)

    return CatalogStore(documents)
