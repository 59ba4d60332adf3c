"""
Database models
"""
from .apparel import Apparel
from .customer import Customer
from .order import ApparelOrder, ApparelOrderLine, ApparelOrderShipment

__all__ = [
    "Apparel",
    "Customer",
    "ApparelOrder",
    "ApparelOrderLine",
    "ApparelOrderShipment",
]
