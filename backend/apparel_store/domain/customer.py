"""
Customer Transfer Shape
"""
from typing import Optional

from pydantic import Field

from apparel_store.domain.base import MAX_ID, BaseEntityDto, NonBlankStr


class CustomerDto(BaseEntityDto):
    """
    Customer DTO

    The customer's orders are not part of this shape; they are reached
    through the apparel order endpoints.
    """

    name: NonBlankStr = Field(..., description="Customer name")
    email: Optional[str] = Field(None, description="Customer email")
    phone_number: Optional[str] = Field(None, description="Customer phone")
    address_line1: NonBlankStr = Field(..., description="Address line 1")
    address_line2: Optional[str] = Field(None, description="Address line 2")
    city: NonBlankStr = Field(..., description="City")
    state: NonBlankStr = Field(..., description="State")
    postal_code: NonBlankStr = Field(..., description="Postal code")


class CustomerReferenceDto(BaseEntityDto):
    """
    Customer as carried on an apparel order

    Only `id` is read when an order is saved; the other fields are filled
    in from the stored customer on reads.
    """

    id: int = Field(..., description="Customer ID", le=MAX_ID)
    name: Optional[str] = Field(None, description="Customer name (read only)")
    email: Optional[str] = Field(None, description="Customer email (read only)")
    phone_number: Optional[str] = Field(None, description="Customer phone (read only)")
    address_line1: Optional[str] = Field(None, description="Address line 1 (read only)")
    address_line2: Optional[str] = Field(None, description="Address line 2 (read only)")
    city: Optional[str] = Field(None, description="City (read only)")
    state: Optional[str] = Field(None, description="State (read only)")
    postal_code: Optional[str] = Field(None, description="Postal code (read only)")
