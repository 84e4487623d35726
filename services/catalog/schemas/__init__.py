"""
데이터셋 서비스 스키마 모듈
"""
from .catalog_schema import CatalogDocument, CatalogKind

__all__ = ["CatalogDocument", "CatalogKind"]
