"""
Mapping Layer - entity <-> DTO conversions
"""
from apparel_store.mappers.apparel_mapper import ApparelMapper
from apparel_store.mappers.customer_mapper import CustomerMapper
from apparel_store.mappers.order_mapper import (
    ApparelOrderMapper,
    ApparelOrderLineMapper,
    ApparelOrderShipmentMapper,
)

__all__ = [
    'ApparelMapper',
    'CustomerMapper',
    'ApparelOrderMapper',
    'ApparelOrderLineMapper',
    'ApparelOrderShipmentMapper',
]
