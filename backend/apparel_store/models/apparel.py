"""
Apparel catalog model
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, DECIMAL
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from apparel_store.core.database import Base


class Apparel(Base):
    """
    Catalog item - one row per sellable apparel product
    """
    __tablename__ = "apparel"

    id = Column(Integer, primary_key=True, index=True)
    version = Column(Integer, nullable=False)

    apparel_name = Column(String(255), nullable=False, index=True)
    apparel_style = Column(String(255), index=True)
    upc = Column(String(64))
    quantity_on_hand = Column(Integer)
    description = Column(Text)
    price = Column(DECIMAL(19, 2))

    # Metadata
    created_date = Column(DateTime(timezone=True), server_default=func.now())
    update_date = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Order lines that reference this apparel (deleting the apparel clears their reference)
    apparel_order_lines = relationship("ApparelOrderLine", back_populates="apparel")

    __mapper_args__ = {"version_id_col": version}
