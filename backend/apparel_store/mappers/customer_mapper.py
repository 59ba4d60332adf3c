"""
Customer Mapper
"""
from apparel_store.domain.customer import CustomerDto, CustomerReferenceDto
from apparel_store.mappers.base import copy_fields
from apparel_store.models.customer import Customer


class CustomerMapper:
    """Mapper for Customer entity and CustomerDto (orders are never mapped)"""

    SCALAR_FIELDS = (
        "name",
        "email",
        "phone_number",
        "address_line1",
        "address_line2",
        "city",
        "state",
        "postal_code",
    )

    def to_dto(self, customer: Customer) -> CustomerDto:
        return CustomerDto(
            id=customer.id,
            version=customer.version,
            created_date=customer.created_date,
            update_date=customer.update_date,
            name=customer.name,
            email=customer.email,
            phone_number=customer.phone_number,
            address_line1=customer.address_line1,
            address_line2=customer.address_line2,
            city=customer.city,
            state=customer.state,
            postal_code=customer.postal_code,
        )

    def to_reference_dto(self, customer: Customer) -> CustomerReferenceDto:
        """Full customer in the shape embedded in apparel orders"""
        return CustomerReferenceDto(**self.to_dto(customer).model_dump())

    def to_entity(self, customer_dto: CustomerDto) -> Customer:
        return copy_fields(customer_dto, Customer(), self.SCALAR_FIELDS)

    def update_from_dto(self, customer_dto: CustomerDto, customer: Customer) -> Customer:
        """Full update of an existing customer; identity and timestamps are kept"""
        return copy_fields(customer_dto, customer, self.SCALAR_FIELDS)
