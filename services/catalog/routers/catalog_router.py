"""
관광 데이터셋 조회 API 라우터
- 시작 시 로드한 문서를 그대로 반환 (필터/페이지네이션 없음)
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from services.catalog.crud.catalog_crud import CatalogStore
from services.catalog.schemas.catalog_schema import CatalogKind

router = APIRouter(prefix="/api", tags=["Catalog"])


def get_catalog(request: Request) -> CatalogStore:
    return request.app.state.catalog


def _document_response(catalog: CatalogStore, kind: CatalogKind) -> Response:
    return Response(content=catalog.get(kind).body, media_type="application/json")


@router.get("/regions")
async def read_regions(catalog: CatalogStore = Depends(get_catalog)):
    """지역 데이터"""
    return _document_response(catalog, CatalogKind.REGIONS)


@router.get("/pois")
async def read_pois(catalog: CatalogStore = Depends(get_catalog)):
    """스팟(POI) 데이터"""
    return _document_response(catalog, CatalogKind.POIS)


@router.get("/courses")
async def read_courses(catalog: CatalogStore = Depends(get_catalog)):
    """코스 데이터"""
    return _document_response(catalog, CatalogKind.COURSES)
