"""
Service wiring for the routers

Each request gets its own session (get_db) and services built on it.
"""
from fastapi import Depends, Path
from sqlalchemy.orm import Session
from typing_extensions import Annotated

from apparel_store.core.database import get_db
from apparel_store.domain.base import MAX_ID
from apparel_store.mappers import (
    ApparelMapper,
    ApparelOrderLineMapper,
    ApparelOrderMapper,
    ApparelOrderShipmentMapper,
    CustomerMapper,
)
from apparel_store.repositories import (
    ApparelOrderRepository,
    ApparelOrderShipmentRepository,
    ApparelRepository,
    CustomerRepository,
)
from apparel_store.services import (
    ApparelOrderService,
    ApparelOrderShipmentService,
    ApparelService,
    CustomerService,
)

# Path identity, bounded to the range of an INTEGER primary key
ResourceId = Annotated[int, Path(le=MAX_ID)]


def get_apparel_service(db: Session = Depends(get_db)) -> ApparelService:
    return ApparelService(db, ApparelRepository(db), ApparelMapper())


def get_customer_service(db: Session = Depends(get_db)) -> CustomerService:
    return CustomerService(db, CustomerRepository(db), CustomerMapper())


def get_apparel_order_service(db: Session = Depends(get_db)) -> ApparelOrderService:
    line_mapper = ApparelOrderLineMapper()
    order_mapper = ApparelOrderMapper(
        line_mapper=line_mapper,
        shipment_mapper=ApparelOrderShipmentMapper(),
        customer_mapper=CustomerMapper(),
    )
    return ApparelOrderService(
        db,
        apparel_order_repository=ApparelOrderRepository(db),
        apparel_repository=ApparelRepository(db),
        customer_repository=CustomerRepository(db),
        apparel_order_mapper=order_mapper,
        apparel_order_line_mapper=line_mapper,
    )


def get_apparel_order_shipment_service(db: Session = Depends(get_db)) -> ApparelOrderShipmentService:
    return ApparelOrderShipmentService(
        db,
        apparel_order_repository=ApparelOrderRepository(db),
        shipment_repository=ApparelOrderShipmentRepository(db),
        shipment_mapper=ApparelOrderShipmentMapper(),
    )
