"""
Pytest fixtures and configuration for Apparel Store Backend tests

This file provides shared fixtures that can be used across all test modules.
Tests run against an in-memory SQLite database created fresh per test.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from apparel_store.core.database import Base, get_db
from apparel_store import models  # noqa: F401
from apparel_store.main import app
from apparel_store.models import Apparel, ApparelOrder, ApparelOrderLine, ApparelOrderShipment, Customer


@pytest.fixture(scope="function")
def engine():
    """
    Provides an in-memory SQLite engine with the full schema

    Scope: function (fresh, empty database per test)
    StaticPool keeps the single in-memory connection alive across threads
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """
    Provides a SQLAlchemy session bound to the test engine

    Scope: function (new session per test)
    Automatically closes session after test
    """
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture(scope="function")
def client(db_session):
    """
    Provides a TestClient whose requests all use the test session

    The lifespan (schema creation on the configured database) is not run.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_apparel_data():
    """
    Provides a valid apparel request body (camelCase, as sent by clients)
    """
    return {
        "apparelName": "Test Apparel",
        "apparelStyle": "IPA",
        "upc": "123123",
        "quantityOnHand": 10,
        "description": "A test apparel",
        "price": 11.99,
    }


@pytest.fixture
def sample_customer_data():
    """
    Provides a valid customer request body
    """
    return {
        "name": "Jane Smith",
        "addressLine1": "456 Oak Ave",
        "city": "Shelbyville",
        "state": "IL",
        "postalCode": "62565",
    }


@pytest.fixture
def apparel(db_session):
    """Persisted apparel row"""
    apparel = Apparel(
        apparel_name="Test Apparel",
        apparel_style="IPA",
        upc="123123",
        quantity_on_hand=10,
        description="A test apparel",
        price=Decimal("11.99"),
    )
    db_session.add(apparel)
    db_session.commit()
    return apparel


@pytest.fixture
def customer(db_session):
    """Persisted customer row"""
    customer = Customer(
        name="Jane Smith",
        email="jane.smith@example.com",
        address_line1="456 Oak Ave",
        city="Shelbyville",
        state="IL",
        postal_code="62565",
    )
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture
def apparel_order(db_session, customer, apparel):
    """
    Persisted order for `customer` with one line (2 x `apparel`) and one shipment
    """
    order = ApparelOrder(customer=customer, payment_amount=Decimal("23.98"), status="NEW")
    order.add_apparel_order_line(ApparelOrderLine(apparel=apparel, order_quantity=2, quantity_allocated=0))
    order.add_shipment(ApparelOrderShipment(
        shipment_date=datetime(2025, 11, 20, 10, 30, tzinfo=timezone.utc),
        carrier="UPS",
        tracking_number="1Z999AA10123456784",
    ))
    db_session.add(order)
    db_session.commit()
    return order
