"""
Pagination shapes

PageRequest carries the zero-based page index and page size into the
repositories; Page is the envelope returned by paginated endpoints.
"""
import math
from typing import Generic, List, TypeVar

from pydantic import BaseModel, Field

from apparel_store.domain.base import CamelModel

T = TypeVar("T")


class PageRequest(BaseModel):
    """Zero-based page index and page size"""

    page: int = Field(0, ge=0)
    size: int = Field(20, ge=1)

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(CamelModel, Generic[T]):
    """
    Page envelope

    Fields:
        content: Items of this page
        total_elements: Number of matching items across all pages
        total_pages: Number of pages for the requested size
        size: Requested page size
        number: Zero-based page index
        number_of_elements: Items on this page
        first: Whether this is the first page
        last: Whether there is no page after this one
        empty: Whether this page has no items
    """

    content: List[T]
    total_elements: int
    total_pages: int
    size: int
    number: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: List[T], page_request: PageRequest, total: int) -> "Page[T]":
        """Build the envelope from one page of items and the total count"""
        total_pages = math.ceil(total / page_request.size) if total else 0

        return cls(
            content=content,
            total_elements=total,
            total_pages=total_pages,
            size=page_request.size,
            number=page_request.page,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=len(content) == 0,
        )
