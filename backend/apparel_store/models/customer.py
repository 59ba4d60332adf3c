"""
Customer model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from apparel_store.core.database import Base


class Customer(Base):
    """
    Customers placing apparel orders
    """
    __tablename__ = "customer"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(Integer, nullable=False)

    # Contact
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255))
    phone_number = Column(String(50))

    # Address
    address_line1 = Column(String(255), nullable=False)
    address_line2 = Column(String(255))
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    postal_code = Column(String(20), nullable=False)

    # Metadata
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Not cascaded: a customer that still has orders cannot be deleted
    apparel_orders = relationship("ApparelOrder", back_populates="customer")

    __mapper_args__ = {"version_id_col": version}
