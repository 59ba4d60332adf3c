"""
Apparel Service
Business logic for the apparel catalog

Purpose:
- Filtered, paginated catalog listing
- Create / full update / partial update / delete of catalog items
"""
import logging
from typing import Optional

from sqlalchemy.orm import Session

from apparel_store.core.database import transaction
from apparel_store.core.exceptions import NotFoundError
from apparel_store.domain.apparel import ApparelDto, ApparelPatchDto
from apparel_store.domain.page import Page, PageRequest
from apparel_store.mappers.apparel_mapper import ApparelMapper
from apparel_store.repositories.apparel_repository import ApparelRepository

logger = logging.getLogger(__name__)


def _has_text(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


class ApparelService:
    """
    Service for the Apparel aggregate

    One instance serves one request; every write runs in its own
    transaction on the injected session.
    """

    def __init__(self, db: Session, apparel_repository: ApparelRepository, apparel_mapper: ApparelMapper):
        self.db = db
        self.apparel_repository = apparel_repository
        self.apparel_mapper = apparel_mapper

    def list_apparels(
        self,
        apparel_name: Optional[str],
        apparel_style: Optional[str],
        page_request: PageRequest,
    ) -> Page[ApparelDto]:
        """
        List catalog items, optionally filtered by name and/or style

        Both filters are case-insensitive substrings. A blank filter is the
        same as no filter.

        Args:
            apparel_name: Substring of the apparel name (optional)
            apparel_style: Substring of the apparel style (optional)
            page_request: Zero-based page index and page size

        Returns:
            Page envelope of ApparelDto
        """
        has_name = _has_text(apparel_name)
        has_style = _has_text(apparel_style)

        if has_name and has_style:
            items, total = self.apparel_repository.find_all_by_name_and_style_containing(
                apparel_name, apparel_style, page_request
            )
        elif has_name:
            items, total = self.apparel_repository.find_all_by_name_containing(apparel_name, page_request)
        elif has_style:
            items, total = self.apparel_repository.find_all_by_name_and_style_containing(
                "", apparel_style, page_request
            )
        else:
            items, total = self.apparel_repository.find_all_by_name_and_style_containing(
                "", "", page_request
            )

        content = [self.apparel_mapper.to_dto(apparel) for apparel in items]
        return Page[ApparelDto].of(content, page_request, total)

    def get_apparel_by_id(self, apparel_id: int) -> Optional[ApparelDto]:
        apparel = self.apparel_repository.find_by_id(apparel_id)
        if apparel is None:
            return None
        return self.apparel_mapper.to_dto(apparel)

    def save_apparel(self, apparel_dto: ApparelDto) -> ApparelDto:
        """
        Insert a new apparel (no id) or fully update an existing one (id set)

        Raises:
            NotFoundError: id given but no such apparel
            ConcurrencyConflictError: dto.version is stale
        """
        with transaction(self.db):
            if apparel_dto.id is None:
                apparel = self.apparel_repository.insert(self.apparel_mapper.to_entity(apparel_dto))
                logger.info(f"Created apparel id={apparel.id} name='{apparel.apparel_name}'")
            else:
                apparel = self.apparel_repository.find_by_id(apparel_dto.id)
                if apparel is None:
                    raise NotFoundError(f"Apparel not found with id: {apparel_dto.id}")

                self.apparel_mapper.update_from_dto(apparel_dto, apparel)
                self.apparel_repository.update(apparel, expected_version=apparel_dto.version)
                logger.info(f"Updated apparel id={apparel.id}")

        return self.apparel_mapper.to_dto(apparel)

    def patch_apparel(self, apparel_id: int, patch_dto: ApparelPatchDto) -> Optional[ApparelDto]:
        """
        Apply the non-null fields of a patch to an existing apparel

        Returns:
            The merged ApparelDto, or None when the apparel does not exist
        """
        with transaction(self.db):
            apparel = self.apparel_repository.find_by_id(apparel_id)
            if apparel is None:
                return None

            self.apparel_mapper.update_from_patch(patch_dto, apparel)
            self.apparel_repository.update(apparel, expected_version=patch_dto.version)
            logger.info(f"Patched apparel id={apparel_id}")

        return self.apparel_mapper.to_dto(apparel)

    def delete_apparel_by_id(self, apparel_id: int) -> None:
        with transaction(self.db):
            self.apparel_repository.delete_by_id(apparel_id)
        logger.info(f"Deleted apparel id={apparel_id}")
