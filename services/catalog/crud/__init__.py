"""
데이터셋 서비스 CRUD 모듈
"""
from .catalog_crud import CatalogStore, load_catalog, read_document

__all__ = ["CatalogStore", "load_catalog", "read_document"]
