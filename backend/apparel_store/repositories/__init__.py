"""
Repository Layer - Data Access

This layer handles all database queries and returns ORM entities.
Repositories abstract away query details from business logic.
"""
from apparel_store.repositories.apparel_repository import ApparelRepository
from apparel_store.repositories.customer_repository import CustomerRepository
from apparel_store.repositories.order_repository import (
    ApparelOrderRepository,
    ApparelOrderLineRepository,
    ApparelOrderShipmentRepository,
)

__all__ = [
    'ApparelRepository',
    'CustomerRepository',
    'ApparelOrderRepository',
    'ApparelOrderLineRepository',
    'ApparelOrderShipmentRepository',
]
