"""
Apparel Order Shipment Service
Shipments are always addressed through their owning order
"""
import logging
from typing import List

from sqlalchemy.orm import Session

from apparel_store.core.database import transaction
from apparel_store.core.exceptions import NotFoundError
from apparel_store.domain.order import ApparelOrderShipmentDto
from apparel_store.mappers.order_mapper import ApparelOrderShipmentMapper
from apparel_store.models.order import ApparelOrderShipment
from apparel_store.repositories.order_repository import ApparelOrderRepository, ApparelOrderShipmentRepository

logger = logging.getLogger(__name__)


class ApparelOrderShipmentService:
    """
    Service for the shipments of an apparel order

    Every lookup by (order_id, shipment_id) first resolves the shipment, then
    checks that it belongs to the order. The two failures carry different
    messages.
    """

    def __init__(
        self,
        db: Session,
        apparel_order_repository: ApparelOrderRepository,
        shipment_repository: ApparelOrderShipmentRepository,
        shipment_mapper: ApparelOrderShipmentMapper,
    ):
        self.db = db
        self.apparel_order_repository = apparel_order_repository
        self.shipment_repository = shipment_repository
        self.shipment_mapper = shipment_mapper

    def list_shipments(self, order_id: int) -> List[ApparelOrderShipmentDto]:
        """Shipments of one order (empty when the order has none or does not exist)"""
        shipments = self.shipment_repository.find_all_by_apparel_order_id(order_id)
        return [self.shipment_mapper.to_dto(shipment) for shipment in shipments]

    def get_shipment_by_id(self, order_id: int, shipment_id: int) -> ApparelOrderShipmentDto:
        """
        Raises:
            NotFoundError: no such shipment, or it belongs to another order
        """
        shipment = self._get_owned_shipment(order_id, shipment_id)
        return self.shipment_mapper.to_dto(shipment)

    def create_shipment(self, order_id: int, shipment_dto: ApparelOrderShipmentDto) -> ApparelOrderShipmentDto:
        """
        Add a shipment to an existing order

        Raises:
            NotFoundError: the order does not exist
        """
        with transaction(self.db):
            order = self.apparel_order_repository.find_by_id(order_id)
            if order is None:
                raise NotFoundError(f"Apparel Order not found with id: {order_id}")

            shipment = self.shipment_mapper.to_entity(shipment_dto)
            order.add_shipment(shipment)
            self.shipment_repository.insert(shipment)
            logger.info(f"Created shipment id={shipment.id} for apparel order id={order_id}")

        return self.shipment_mapper.to_dto(shipment)

    def update_shipment(self, order_id: int, shipment_id: int,
                        shipment_dto: ApparelOrderShipmentDto) -> ApparelOrderShipmentDto:
        with transaction(self.db):
            shipment = self._get_owned_shipment(order_id, shipment_id)
            self.shipment_mapper.update_from_dto(shipment_dto, shipment)
            self.shipment_repository.update(shipment, expected_version=shipment_dto.version)
            logger.info(f"Updated shipment id={shipment_id} of apparel order id={order_id}")

        return self.shipment_mapper.to_dto(shipment)

    def delete_shipment(self, order_id: int, shipment_id: int) -> None:
        with transaction(self.db):
            shipment = self._get_owned_shipment(order_id, shipment_id)
            order = self.apparel_order_repository.find_by_id(order_id)
            order.remove_shipment(shipment)
            self.shipment_repository.delete(shipment)

        logger.info(f"Deleted shipment id={shipment_id} of apparel order id={order_id}")

    def _get_owned_shipment(self, order_id: int, shipment_id: int) -> ApparelOrderShipment:
        shipment = self.shipment_repository.find_by_id(shipment_id)
        if shipment is None:
            raise NotFoundError(f"Shipment not found with id: {shipment_id}")

        if shipment.apparel_order_id != order_id:
            raise NotFoundError(f"Shipment not found for Apparel Order with id: {order_id}")

        return shipment
