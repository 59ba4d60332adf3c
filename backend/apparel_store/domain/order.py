"""
Apparel Order Transfer Shapes

Represents orders, their lines and their shipments at the HTTP boundary.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from apparel_store.domain.base import MAX_ID, BaseEntityDto, Money
from apparel_store.domain.customer import CustomerReferenceDto


class ApparelOrderLineDto(BaseEntityDto):
    """
    Order line DTO

    Fields:
        apparel_id: Referenced apparel (used to resolve the catalog item on save)
        apparel_name: Apparel name, copied from the catalog on reads
        apparel_style: Apparel style, copied from the catalog on reads
        upc: Apparel UPC, copied from the catalog on reads
        order_quantity: Units ordered (positive)
        quantity_allocated: Units allocated so far (zero or positive)
        status: Free-form line status
    """

    apparel_id: Optional[int] = Field(None, description="Apparel ID", le=MAX_ID)
    apparel_name: Optional[str] = Field(None, description="Apparel name (read only)")
    apparel_style: Optional[str] = Field(None, description="Apparel style (read only)")
    upc: Optional[str] = Field(None, description="Apparel UPC (read only)")

    order_quantity: int = Field(..., description="Quantity ordered", gt=0)
    quantity_allocated: Optional[int] = Field(None, description="Quantity allocated", ge=0)
    status: Optional[str] = Field(None, description="Line status")


class ApparelOrderShipmentDto(BaseEntityDto):
    """Shipment DTO"""

    shipment_date: datetime = Field(..., description="When the shipment left")
    carrier: Optional[str] = Field(None, description="Carrier name")
    tracking_number: Optional[str] = Field(None, description="Carrier tracking number")


class ApparelOrderDto(BaseEntityDto):
    """
    Apparel order DTO

    Fields:
        customer: Customer placing the order; only its id is required on save
        payment_amount: Amount paid (positive)
        status: Free-form order status (NEW, PAID, CANCELLED, INPROCESS, COMPLETE)
        apparel_order_lines: Ordered items, at least one
        shipments: Shipments of the order (read only here, managed through
            the shipment endpoints)
    """

    customer: CustomerReferenceDto = Field(..., description="Customer")
    payment_amount: Money = Field(..., description="Payment amount", gt=0)
    status: Optional[str] = Field(None, description="Order status")
    apparel_order_lines: List[ApparelOrderLineDto] = Field(
        ...,
        description="Order lines",
        min_length=1,
    )
    shipments: List[ApparelOrderShipmentDto] = Field(default_factory=list, description="Shipments")
