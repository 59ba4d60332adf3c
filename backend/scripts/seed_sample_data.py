#!/usr/bin/env python3
"""
Seed sample data
================

Inserts a small apparel catalog, two customers and one order with a
shipment, going through the service layer so every business rule applies.

Skipped when the catalog already has rows (use --force to seed anyway).

Usage:
    python3 scripts/seed_sample_data.py
"""
import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from decimal import Decimal

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from apparel_store.api.dependencies import (  # noqa: E402
    get_apparel_order_service,
    get_apparel_order_shipment_service,
    get_apparel_service,
    get_customer_service,
)
from apparel_store.core.config import settings  # noqa: E402
from apparel_store.core.database import SessionLocal, init_db  # noqa: E402
from apparel_store.domain import (  # noqa: E402
    ApparelDto,
    ApparelOrderDto,
    ApparelOrderLineDto,
    ApparelOrderShipmentDto,
    CustomerDto,
    CustomerReferenceDto,
)
from apparel_store.repositories import ApparelRepository  # noqa: E402

SAMPLE_APPARELS = [
    {"apparel_name": "Classic Denim Jacket", "apparel_style": "Loose", "upc": "0631234200036",
     "quantity_on_hand": 120, "price": Decimal("79.90"), "description": "Stonewashed cotton denim"},
    {"apparel_name": "Slim Chino Pants", "apparel_style": "Slim", "upc": "0631234300019",
     "quantity_on_hand": 200, "price": Decimal("49.50")},
    {"apparel_name": "Oxford Shirt", "apparel_style": "Regular", "upc": "9122089364",
     "quantity_on_hand": 75, "price": Decimal("39.99"), "description": "Button-down collar"},
    {"apparel_name": "Wool Overcoat", "apparel_style": "Tailored", "upc": "0083783375213",
     "quantity_on_hand": 30, "price": Decimal("249.00")},
]

SAMPLE_CUSTOMERS = [
    {"name": "Jane Smith", "email": "jane.smith@example.com", "address_line1": "456 Oak Ave",
     "city": "Shelbyville", "state": "IL", "postal_code": "62565"},
    {"name": "John Doe", "phone_number": "555-0100", "address_line1": "123 Main St",
     "address_line2": "Apt 4B", "city": "Springfield", "state": "IL", "postal_code": "62701"},
]


def seed(force: bool = False) -> None:
    db = SessionLocal()
    try:
        if ApparelRepository(db).count() > 0 and not force:
            print("⏭️  Catalog already has rows, skipping (use --force to seed anyway)")
            return

        apparel_service = get_apparel_service(db)
        customer_service = get_customer_service(db)
        order_service = get_apparel_order_service(db)
        shipment_service = get_apparel_order_shipment_service(db)

        print("👕 Creating apparels...")
        apparels = [apparel_service.save_apparel(ApparelDto(**data)) for data in SAMPLE_APPARELS]
        for apparel in apparels:
            print(f"  ✅ {apparel.id}: {apparel.apparel_name} ({apparel.apparel_style})")

        print("👤 Creating customers...")
        customers = [customer_service.save_customer(CustomerDto(**data)) for data in SAMPLE_CUSTOMERS]
        for customer in customers:
            print(f"  ✅ {customer.id}: {customer.name}")

        print("🧾 Creating order...")
        order = order_service.save_apparel_order(ApparelOrderDto(
            customer=CustomerReferenceDto(id=customers[0].id),
            payment_amount=Decimal("209.30"),
            status="NEW",
            apparel_order_lines=[
                ApparelOrderLineDto(apparel_id=apparels[0].id, order_quantity=2, quantity_allocated=2),
                ApparelOrderLineDto(apparel_id=apparels[1].id, order_quantity=1, quantity_allocated=0),
            ],
        ))
        print(f"  ✅ Order {order.id} with {len(order.apparel_order_lines)} lines")

        shipment = shipment_service.create_shipment(order.id, ApparelOrderShipmentDto(
            shipment_date=datetime.now(timezone.utc),
            carrier="UPS",
            tracking_number="1Z999AA10123456784",
        ))
        print(f"  🚚 Shipment {shipment.id} via {shipment.carrier}")

        print("✅ Sample data loaded")
    finally:
        db.close()


def main():
    parser = argparse.ArgumentParser(description='Seed the Apparel Store with sample data')
    parser.add_argument('--force', action='store_true', help='Seed even when the catalog is not empty')
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    init_db()
    seed(force=args.force)


if __name__ == '__main__':
    main()
