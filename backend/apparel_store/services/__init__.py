"""
Service Layer - one service per aggregate root
"""
from apparel_store.services.apparel_service import ApparelService
from apparel_store.services.customer_service import CustomerService
from apparel_store.services.apparel_order_service import ApparelOrderService
from apparel_store.services.apparel_order_shipment_service import ApparelOrderShipmentService

__all__ = [
    'ApparelService',
    'CustomerService',
    'ApparelOrderService',
    'ApparelOrderShipmentService',
]
