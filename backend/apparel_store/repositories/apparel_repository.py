"""
Apparel Repository - Data Access Layer for the apparel catalog

Handles all database queries for apparel, including the filtered and
paginated catalog listings.
"""
from typing import List, Tuple

from sqlalchemy import func, select

from apparel_store.domain.page import PageRequest
from apparel_store.models.apparel import Apparel
from apparel_store.repositories.base import SqlAlchemyRepository, contains_pattern


class ApparelRepository(SqlAlchemyRepository[Apparel]):
    """
    Repository for Apparel data access

    Both listing queries match case-insensitively on substrings; an empty
    filter string matches every row.
    """

    model = Apparel
    entity_name = "Apparel"

    def _find_page(self, conditions: list, page_request: PageRequest) -> Tuple[List[Apparel], int]:
        # Get total count
        total = self.db.scalar(
            select(func.count()).select_from(Apparel).where(*conditions)
        )

        # Get the requested page
        rows = self.db.scalars(
            select(Apparel)
            .where(*conditions)
            .order_by(Apparel.id)
            .limit(page_request.size)
            .offset(page_request.offset)
        ).all()

        return list(rows), total

    def find_all_by_name_containing(
        self,
        apparel_name: str,
        page_request: PageRequest
    ) -> Tuple[List[Apparel], int]:
        """
        Find apparel whose name contains the given text

        Args:
            apparel_name: Substring to look for (case-insensitive)
            page_request: Page index and size

        Returns:
            Tuple of (apparel on the requested page, total matching count)
        """
        conditions = [
            Apparel.apparel_name.ilike(contains_pattern(apparel_name), escape="\\"),
        ]
        return self._find_page(conditions, page_request)

    def find_all_by_name_and_style_containing(
        self,
        apparel_name: str,
        apparel_style: str,
        page_request: PageRequest
    ) -> Tuple[List[Apparel], int]:
        """
        Find apparel whose name AND style contain the given texts

        Args:
            apparel_name: Name substring (case-insensitive, "" matches all)
            apparel_style: Style substring (case-insensitive, "" matches all)
            page_request: Page index and size

        Returns:
            Tuple of (apparel on the requested page, total matching count)
        """
        conditions = [
            Apparel.apparel_name.ilike(contains_pattern(apparel_name), escape="\\"),
            Apparel.apparel_style.ilike(contains_pattern(apparel_style), escape="\\"),
        ]
        return self._find_page(conditions, page_request)
