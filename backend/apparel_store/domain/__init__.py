"""
Domain Layer - Transfer Shapes

This layer contains the Pydantic models exchanged at the HTTP boundary.
These models enforce type safety and validation across the application.
"""
from apparel_store.domain.apparel import ApparelDto, ApparelPatchDto
from apparel_store.domain.customer import CustomerDto, CustomerReferenceDto
from apparel_store.domain.order import ApparelOrderDto, ApparelOrderLineDto, ApparelOrderShipmentDto
from apparel_store.domain.page import Page, PageRequest
from apparel_store.domain.problem import ProblemDetails

__all__ = [
    'ApparelDto',
    'ApparelPatchDto',
    'CustomerDto',
    'CustomerReferenceDto',
    'ApparelOrderDto',
    'ApparelOrderLineDto',
    'ApparelOrderShipmentDto',
    'Page',
    'PageRequest',
    'ProblemDetails',
]
