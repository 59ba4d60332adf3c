"""
Apparels API Endpoints
Handles the apparel catalog: filtered listing, CRUD and partial updates
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from apparel_store.api.dependencies import ResourceId, get_apparel_service
from apparel_store.core.config import settings
from apparel_store.domain.apparel import ApparelDto, ApparelPatchDto
from apparel_store.domain.page import Page, PageRequest
from apparel_store.services.apparel_service import ApparelService

router = APIRouter()


@router.get("", response_model=Page[ApparelDto])
def get_all_apparels(
    apparel_name: Optional[str] = Query(None, alias="apparelName", description="Filter by name (substring, case-insensitive)"),
    apparel_style: Optional[str] = Query(None, alias="apparelStyle", description="Filter by style (substring, case-insensitive)"),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Page size"),
    service: ApparelService = Depends(get_apparel_service),
):
    """
    Get apparels with optional name/style filters and pagination

    Returns the page envelope (content, totalElements, totalPages, ...)
    """
    return service.list_apparels(apparel_name, apparel_style, PageRequest(page=page, size=size))


@router.get("/{apparel_id}", response_model=ApparelDto, responses={404: {"description": "Apparel not found"}})
def get_apparel_by_id(apparel_id: ResourceId, service: ApparelService = Depends(get_apparel_service)):
    apparel = service.get_apparel_by_id(apparel_id)
    if apparel is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return apparel


@router.post("", response_model=ApparelDto, status_code=status.HTTP_201_CREATED)
def create_apparel(apparel_dto: ApparelDto, service: ApparelService = Depends(get_apparel_service)):
    """Create a new apparel; any id in the body is ignored"""
    return service.save_apparel(apparel_dto.model_copy(update={"id": None}))


@router.put("/{apparel_id}", response_model=ApparelDto, responses={404: {"description": "Apparel not found"}})
def update_apparel(apparel_id: ResourceId, apparel_dto: ApparelDto, service: ApparelService = Depends(get_apparel_service)):
    """
    Replace every field of an existing apparel

    Send the current `version` to reject the update (409) when the apparel
    changed since it was read.
    """
    if service.get_apparel_by_id(apparel_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return service.save_apparel(apparel_dto.model_copy(update={"id": apparel_id}))


@router.patch("/{apparel_id}", response_model=ApparelDto, responses={404: {"description": "Apparel not found"}})
def patch_apparel(apparel_id: ResourceId, patch_dto: ApparelPatchDto, service: ApparelService = Depends(get_apparel_service)):
    """Update only the fields present (non-null) in the body"""
    apparel = service.patch_apparel(apparel_id, patch_dto)
    if apparel is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return apparel


@router.delete("/{apparel_id}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"description": "Apparel not found"}})
def delete_apparel(apparel_id: ResourceId, service: ApparelService = Depends(get_apparel_service)):
    if service.get_apparel_by_id(apparel_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    service.delete_apparel_by_id(apparel_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
