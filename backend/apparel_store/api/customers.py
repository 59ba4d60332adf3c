"""
Customers API Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from apparel_store.api.dependencies import ResourceId, get_customer_service
from apparel_store.domain.customer import CustomerDto
from apparel_store.services.customer_service import CustomerService

router = APIRouter()


@router.get("", response_model=List[CustomerDto])
def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    return service.list_customers()


@router.get("/{customer_id}", response_model=CustomerDto, responses={404: {"description": "Customer not found"}})
def get_customer_by_id(customer_id: ResourceId, service: CustomerService = Depends(get_customer_service)):
    customer = service.get_customer_by_id(customer_id)
    if customer is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return customer


@router.post("", response_model=CustomerDto, status_code=status.HTTP_201_CREATED)
def create_customer(customer_dto: CustomerDto, service: CustomerService = Depends(get_customer_service)):
    return service.save_customer(customer_dto.model_copy(update={"id": None}))


@router.put("/{customer_id}", response_model=CustomerDto)
def update_customer(customer_id: ResourceId, customer_dto: CustomerDto,
                    service: CustomerService = Depends(get_customer_service)):
    """
    Replace every field of an existing customer

    A missing customer is reported by the service as a 404 problem document.
    """
    return service.update_customer(customer_id, customer_dto)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT,
               responses={404: {"description": "Customer not found"}})
def delete_customer(customer_id: ResourceId, service: CustomerService = Depends(get_customer_service)):
    if service.get_customer_by_id(customer_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    service.delete_customer_by_id(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
