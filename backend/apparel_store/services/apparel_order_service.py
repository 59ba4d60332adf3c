"""
Apparel Order Service
Handles order creation and replacement, resolving customers and catalog items
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from apparel_store.core.database import transaction
from apparel_store.core.exceptions import ApparelOrderError, NotFoundError
from apparel_store.domain.order import ApparelOrderDto
from apparel_store.mappers.order_mapper import ApparelOrderLineMapper, ApparelOrderMapper
from apparel_store.models.customer import Customer
from apparel_store.models.order import ApparelOrder
from apparel_store.repositories.apparel_repository import ApparelRepository
from apparel_store.repositories.customer_repository import CustomerRepository
from apparel_store.repositories.order_repository import ApparelOrderRepository

logger = logging.getLogger(__name__)


class ApparelOrderService:
    """
    Service for the ApparelOrder aggregate (order + lines)

    Handles:
    - Customer resolution (by id, required)
    - Apparel resolution per line (by id, optional)
    - Line replacement on update
    - Cascade delete of lines and shipments

    Shipments are managed by ApparelOrderShipmentService; the shipments of
    an order DTO are ignored on save.
    """

    def __init__(
        self,
        db: Session,
        apparel_order_repository: ApparelOrderRepository,
        apparel_repository: ApparelRepository,
        customer_repository: CustomerRepository,
        apparel_order_mapper: ApparelOrderMapper,
        apparel_order_line_mapper: ApparelOrderLineMapper,
    ):
        self.db = db
        self.apparel_order_repository = apparel_order_repository
        self.apparel_repository = apparel_repository
        self.customer_repository = customer_repository
        self.apparel_order_mapper = apparel_order_mapper
        self.apparel_order_line_mapper = apparel_order_line_mapper

    def list_apparel_orders(self) -> List[ApparelOrderDto]:
        return [self.apparel_order_mapper.to_dto(order) for order in self.apparel_order_repository.find_all()]

    def get_apparel_order_by_id(self, order_id: int) -> Optional[ApparelOrderDto]:
        order = self.apparel_order_repository.find_by_id(order_id)
        if order is None:
            return None
        return self.apparel_order_mapper.to_dto(order)

    def save_apparel_order(self, order_dto: ApparelOrderDto) -> ApparelOrderDto:
        """
        Create a new order (no id) or replace an existing one (id set)

        On replace, scalar fields are overwritten and the lines are replaced
        by the lines of the DTO; existing shipments are kept.

        Args:
            order_dto: Order with customer reference and at least one line

        Returns:
            The persisted order

        Raises:
            ApparelOrderError: no customer with the given id
            NotFoundError: id given but no such order
            ConcurrencyConflictError: order_dto.version is stale
        """
        with transaction(self.db):
            customer = self._resolve_customer(order_dto)

            if order_dto.id is None:
                order = self.apparel_order_mapper.to_entity(order_dto)
            else:
                order = self.apparel_order_repository.find_by_id(order_dto.id)
                if order is None:
                    raise NotFoundError(f"Apparel Order not found with id: {order_dto.id}")

                self.apparel_order_mapper.update_from_dto(order_dto, order)
                for line in list(order.apparel_order_lines):
                    order.remove_apparel_order_line(line)

            order.customer = customer
            self._attach_lines(order, order_dto)

            if order.id is None:
                self.apparel_order_repository.insert(order)
                logger.info(
                    f"Created apparel order id={order.id} customer_id={customer.id} "
                    f"lines={len(order.apparel_order_lines)}"
                )
            else:
                self.apparel_order_repository.update(order, expected_version=order_dto.version)
                logger.info(f"Updated apparel order id={order.id} lines={len(order.apparel_order_lines)}")

        return self.apparel_order_mapper.to_dto(order)

    def delete_apparel_order_by_id(self, order_id: int) -> None:
        """Delete an order together with its lines and shipments"""
        with transaction(self.db):
            self.apparel_order_repository.delete_by_id(order_id)
        logger.info(f"Deleted apparel order id={order_id}")

    def _resolve_customer(self, order_dto: ApparelOrderDto) -> Customer:
        customer_id = order_dto.customer.id
        customer = self.customer_repository.find_by_id(customer_id)
        if customer is None:
            raise ApparelOrderError(
                f"Customer not found with id: {customer_id}",
                {"customer_id": customer_id},
            )
        return customer

    def _attach_lines(self, order: ApparelOrder, order_dto: ApparelOrderDto) -> None:
        for line_dto in order_dto.apparel_order_lines:
            line = self.apparel_order_line_mapper.to_entity(line_dto)

            # Unknown apparel ids leave the line without a catalog item
            if line_dto.apparel_id is not None:
                apparel = self.apparel_repository.find_by_id(line_dto.apparel_id)
                if apparel is None:
                    logger.warning(f"Apparel id={line_dto.apparel_id} not found, order line saved without apparel")
                line.apparel = apparel

            order.add_apparel_order_line(line)
