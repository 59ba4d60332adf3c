"""
Apparel Transfer Shapes

Represents a catalog item at the HTTP boundary.
"""
from typing import Optional

from pydantic import Field

from apparel_store.domain.base import BaseEntityDto, Money, NonBlankStr


class ApparelDto(BaseEntityDto):
    """
    Apparel DTO - used for reads, creation and full updates

    Fields:
        apparel_name: Product name
        apparel_style: Style of the apparel (e.g. "Loose", "Slim", "IPA")
        upc: Universal Product Code
        quantity_on_hand: Units in stock (zero or positive)
        description: Free-text description (optional)
        price: Unit price (positive)
    """

    apparel_name: NonBlankStr = Field(..., description="Apparel name")
    apparel_style: NonBlankStr = Field(..., description="Apparel style")
    upc: NonBlankStr = Field(..., description="Universal Product Code")
    quantity_on_hand: int = Field(..., description="Quantity on hand", ge=0)
    description: Optional[str] = Field(None, description="Apparel description")
    price: Money = Field(..., description="Unit price", gt=0)


class ApparelPatchDto(BaseEntityDto):
    """
    Schema for partial updates - every field optional, None means unchanged

    Present values follow the same rules as ApparelDto so a patch can never
    store something a full update would reject.
    """

    apparel_name: Optional[NonBlankStr] = None
    apparel_style: Optional[NonBlankStr] = None
    upc: Optional[NonBlankStr] = None
    quantity_on_hand: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    price: Optional[Money] = Field(None, gt=0)
