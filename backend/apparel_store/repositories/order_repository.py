"""
Order Repositories - Data Access Layer for orders, lines and shipments
"""
from typing import List

from sqlalchemy import select

from apparel_store.models.order import ApparelOrder, ApparelOrderLine, ApparelOrderShipment
from apparel_store.repositories.base import SqlAlchemyRepository


class ApparelOrderRepository(SqlAlchemyRepository[ApparelOrder]):
    """
    Repository for ApparelOrder data access

    Lines and shipments are saved and deleted together with their order.
    """

    model = ApparelOrder
    entity_name = "Apparel Order"


class ApparelOrderLineRepository(SqlAlchemyRepository[ApparelOrderLine]):
    """Repository for ApparelOrderLine data access"""

    model = ApparelOrderLine
    entity_name = "Apparel Order Line"


class ApparelOrderShipmentRepository(SqlAlchemyRepository[ApparelOrderShipment]):
    """Repository for ApparelOrderShipment data access"""

    model = ApparelOrderShipment
    entity_name = "Apparel Order Shipment"

    def find_all_by_apparel_order_id(self, apparel_order_id: int) -> List[ApparelOrderShipment]:
        """
        Find the shipments of one order

        Args:
            apparel_order_id: Owning order ID

        Returns:
            Shipments ordered by ID (empty when the order has none or does not exist)
        """
        rows = self.db.scalars(
            select(ApparelOrderShipment)
            .where(ApparelOrderShipment.apparel_order_id == apparel_order_id)
            .order_by(ApparelOrderShipment.id)
        ).all()
        return list(rows)
