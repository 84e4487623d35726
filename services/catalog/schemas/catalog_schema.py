"""
관광 데이터셋(지역/스팟/코스) 스키마
"""
from enum import Enum
from typing import Any, Tuple

from pydantic import BaseModel, ConfigDict


class CatalogKind(str, Enum):
    REGIONS = "regions"
    POIS = "pois"
    COURSES = "courses"

    @property
    def filename(self) -> str:
        return f"{self.value}.json"


class CatalogDocument(BaseModel):
    """
    시작 시 읽은 데이터셋 문서 (불변)
    - body: 원본 JSON 바이트 그대로 (응답에 그대로 사용)
    - items: 파싱된 레코드
    """
    model_config = ConfigDict(frozen=True)

    kind: CatalogKind
    body: bytes
    items: Tuple[Any, ...] = ()

    @classmethod
    def empty(cls, kind: CatalogKind) -> "CatalogDocument":
        return cls(kind=kind, body=b"[]", items=())
