"""
Apparel Order Mappers

Conversions for orders, order lines and shipments. The order mapper is
composed of the line, shipment and customer mappers for its nested shapes.
"""
from typing import Optional

from apparel_store.domain.order import ApparelOrderDto, ApparelOrderLineDto, ApparelOrderShipmentDto
from apparel_store.mappers.base import copy_fields
from apparel_store.mappers.customer_mapper import CustomerMapper
from apparel_store.models.order import ApparelOrder, ApparelOrderLine, ApparelOrderShipment


class ApparelOrderLineMapper:
    """Mapper for ApparelOrderLine entity and ApparelOrderLineDto"""

    SCALAR_FIELDS = ("order_quantity", "quantity_allocated", "status")

    def to_dto(self, line: ApparelOrderLine) -> ApparelOrderLineDto:
        """
        Map a line, flattening the referenced apparel's id, name, style and
        UPC into the DTO (all None when the line has no apparel)
        """
        apparel = line.apparel

        return ApparelOrderLineDto(
            id=line.id,
            version=line.version,
            created_date=line.created_date,
            update_date=line.update_date,
            apparel_id=apparel.id if apparel is not None else None,
            apparel_name=apparel.apparel_name if apparel is not None else None,
            apparel_style=apparel.apparel_style if apparel is not None else None,
            upc=apparel.upc if apparel is not None else None,
            order_quantity=line.order_quantity,
            quantity_allocated=line.quantity_allocated,
            status=line.status,
        )

    def to_entity(self, line_dto: ApparelOrderLineDto) -> ApparelOrderLine:
        """Apparel and owning order are resolved by the service, not here"""
        return copy_fields(line_dto, ApparelOrderLine(), self.SCALAR_FIELDS)


class ApparelOrderShipmentMapper:
    """Mapper for ApparelOrderShipment entity and ApparelOrderShipmentDto"""

    SCALAR_FIELDS = ("shipment_date", "carrier", "tracking_number")

    def to_dto(self, shipment: ApparelOrderShipment) -> ApparelOrderShipmentDto:
        return ApparelOrderShipmentDto(
            id=shipment.id,
            version=shipment.version,
            created_date=shipment.created_date,
            update_date=shipment.update_date,
            shipment_date=shipment.shipment_date,
            carrier=shipment.carrier,
            tracking_number=shipment.tracking_number,
        )

    def to_entity(self, shipment_dto: ApparelOrderShipmentDto) -> ApparelOrderShipment:
        return copy_fields(shipment_dto, ApparelOrderShipment(), self.SCALAR_FIELDS)

    def update_from_dto(self, shipment_dto: ApparelOrderShipmentDto,
                        shipment: ApparelOrderShipment) -> ApparelOrderShipment:
        return copy_fields(shipment_dto, shipment, self.SCALAR_FIELDS)


class ApparelOrderMapper:
    """
    Mapper for ApparelOrder entity and ApparelOrderDto

    Entity -> DTO maps the customer, lines and shipments recursively.
    DTO -> entity copies scalars only; customer, lines and shipments are
    resolved and attached by the service.
    """

    SCALAR_FIELDS = ("payment_amount", "status")

    def __init__(
        self,
        line_mapper: Optional[ApparelOrderLineMapper] = None,
        shipment_mapper: Optional[ApparelOrderShipmentMapper] = None,
        customer_mapper: Optional[CustomerMapper] = None,
    ):
        self.line_mapper = line_mapper or ApparelOrderLineMapper()
        self.shipment_mapper = shipment_mapper or ApparelOrderShipmentMapper()
        self.customer_mapper = customer_mapper or CustomerMapper()

    def to_dto(self, order: ApparelOrder) -> ApparelOrderDto:
        return ApparelOrderDto(
            id=order.id,
            version=order.version,
            created_date=order.created_date,
            update_date=order.update_date,
            customer=self.customer_mapper.to_reference_dto(order.customer),
            payment_amount=order.payment_amount,
            status=order.status,
            apparel_order_lines=[self.line_mapper.to_dto(line) for line in order.apparel_order_lines],
            shipments=[self.shipment_mapper.to_dto(shipment) for shipment in order.shipments],
        )

    def to_entity(self, order_dto: ApparelOrderDto) -> ApparelOrder:
        return copy_fields(order_dto, ApparelOrder(), self.SCALAR_FIELDS)

    def update_from_dto(self, order_dto: ApparelOrderDto, order: ApparelOrder) -> ApparelOrder:
        return copy_fields(order_dto, order, self.SCALAR_FIELDS)
