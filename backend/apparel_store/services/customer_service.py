"""
Customer Service
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from apparel_store.core.database import transaction
from apparel_store.core.exceptions import ApparelOrderError, NotFoundError
from apparel_store.domain.customer import CustomerDto
from apparel_store.mappers.customer_mapper import CustomerMapper
from apparel_store.repositories.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """Service for the Customer aggregate"""

    def __init__(self, db: Session, customer_repository: CustomerRepository, customer_mapper: CustomerMapper):
        self.db = db
        self.customer_repository = customer_repository
        self.customer_mapper = customer_mapper

    def list_customers(self) -> List[CustomerDto]:
        return [self.customer_mapper.to_dto(customer) for customer in self.customer_repository.find_all()]

    def get_customer_by_id(self, customer_id: int) -> Optional[CustomerDto]:
        customer = self.customer_repository.find_by_id(customer_id)
        if customer is None:
            return None
        return self.customer_mapper.to_dto(customer)

    def save_customer(self, customer_dto: CustomerDto) -> CustomerDto:
        """Insert a new customer"""
        with transaction(self.db):
            customer = self.customer_repository.insert(self.customer_mapper.to_entity(customer_dto))
            logger.info(f"Created customer id={customer.id} name='{customer.name}'")

        return self.customer_mapper.to_dto(customer)

    def update_customer(self, customer_id: int, customer_dto: CustomerDto) -> CustomerDto:
        """
        Fully update an existing customer

        Raises:
            NotFoundError: no customer with that id
            ConcurrencyConflictError: customer_dto.version is stale
        """
        with transaction(self.db):
            customer = self.customer_repository.find_by_id(customer_id)
            if customer is None:
                raise NotFoundError(f"Customer not found with id: {customer_id}")

            self.customer_mapper.update_from_dto(customer_dto, customer)
            self.customer_repository.update(customer, expected_version=customer_dto.version)
            logger.info(f"Updated customer id={customer_id}")

        return self.customer_mapper.to_dto(customer)

    def delete_customer_by_id(self, customer_id: int) -> None:
        """
        Delete a customer

        Raises:
            ApparelOrderError: the customer still has orders
        """
        with transaction(self.db):
            customer = self.customer_repository.find_by_id(customer_id)
            if customer is None:
                return

            if customer.apparel_orders:
                raise ApparelOrderError(
                    f"Customer with id {customer_id} still has apparel orders",
                    {"customer_id": customer_id, "order_count": len(customer.apparel_orders)},
                )

            self.customer_repository.delete(customer)

        logger.info(f"Deleted customer id={customer_id}")
