"""
Customer Repository - Data Access Layer for customers
"""
from apparel_store.models.customer import Customer
from apparel_store.repositories.base import SqlAlchemyRepository


class CustomerRepository(SqlAlchemyRepository[Customer]):
    """Repository for Customer data access"""

    model = Customer
    entity_name = "Customer"
