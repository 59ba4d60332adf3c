"""
Shared pieces of the transfer shapes

Every DTO exposes camelCase JSON names (apparelName, quantityOnHand, ...)
while the Python attributes stay snake_case; both are accepted on input.
"""
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel
from typing_extensions import Annotated


# Decimal in Python, JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]

# Required text: present, and not only whitespace
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# Largest identity an INTEGER primary key can hold
MAX_ID = 2**31 - 1


class CamelModel(BaseModel):
    """Base model with camelCase aliases"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BaseEntityDto(CamelModel):
    """
    Fields common to every DTO

    All four are assigned by the server. Clients may echo `version` back on
    updates to get an optimistic-lock check.
    """

    id: Optional[int] = Field(None, description="Server-assigned identity (read only)")
    version: Optional[int] = Field(None, description="Optimistic-lock version")
    created_date: Optional[datetime] = Field(None, description="Creation timestamp (read only)")
    update_date: Optional[datetime] = Field(None, description="Last update timestamp (read only)")
