"""
Apparel order models: orders, their lines and their shipments
"""
from sqlalchemy import Column, Integer, String, DateTime, DECIMAL, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from apparel_store.core.database import Base


class ApparelOrder(Base):
    """
    Main orders table - aggregate root for lines and shipments

    Lines and shipments are owned by the order: they are saved and deleted
    with it, and removing one from its collection deletes the row.
    """
    __tablename__ = "apparel_order"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(Integer, nullable=False)

    # Relations
    customer_id = Column(Integer, ForeignKey("customer.id"), index=True)

    # Amounts
    payment_amount = Column(DECIMAL(19, 2))

    # Free-form status: NEW, PAID, CANCELLED, INPROCESS, COMPLETE
    status = Column(String(50), index=True)

    # Metadata
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    customer = relationship("Customer", back_populates="apparel_orders")
    apparel_order_lines = relationship(
        "ApparelOrderLine",
        cascade="all, delete-orphan",
        order_by="ApparelOrderLine.id",
    )
    shipments = relationship(
        "ApparelOrderShipment",
        cascade="all, delete-orphan",
        order_by="ApparelOrderShipment.id",
    )

    __mapper_args__ = {"version_id_col": version}

    def add_apparel_order_line(self, line: "ApparelOrderLine") -> None:
        """Attach a line to this order"""
        self.apparel_order_lines.append(line)
        line.apparel_order_id = self.id

    def remove_apparel_order_line(self, line: "ApparelOrderLine") -> None:
        """Detach a line from this order (the line is deleted on flush)"""
        self.apparel_order_lines.remove(line)
        line.apparel_order_id = None

    def add_shipment(self, shipment: "ApparelOrderShipment") -> None:
        """Attach a shipment to this order"""
        self.shipments.append(shipment)
        shipment.apparel_order_id = self.id

    def remove_shipment(self, shipment: "ApparelOrderShipment") -> None:
        """Detach a shipment from this order (the shipment is deleted on flush)"""
        self.shipments.remove(shipment)
        shipment.apparel_order_id = None


class ApparelOrderLine(Base):
    """
    Line items of each order
    """
    __tablename__ = "apparel_order_line"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(Integer, nullable=False)

    apparel_order_id = Column(Integer, ForeignKey("apparel_order.id", ondelete="CASCADE"), index=True)
    apparel_id = Column(Integer, ForeignKey("apparel.id"), index=True)

    # Quantities
    order_quantity = Column(Integer)
    quantity_allocated = Column(Integer)

    status = Column(String(50))

    # Metadata
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    apparel = relationship("Apparel", back_populates="apparel_order_lines")

    __mapper_args__ = {"version_id_col": version}


class ApparelOrderShipment(Base):
    """
    Shipments dispatched for an order
    """
    __tablename__ = "apparel_order_shipment"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(Integer, nullable=False)

    apparel_order_id = Column(Integer, ForeignKey("apparel_order.id", ondelete="CASCADE"), index=True)

    shipment_date = Column(DateTime(timezone=True), nullable=False)
    carrier = Column(String(100))
    tracking_number = Column(String(100))

    # Metadata
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __mapper_args__ = {"version_id_col": version}
