"""
Apparel Orders API Endpoints
Handles orders and their lines (shipments live under apparel_order_shipments)
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from apparel_store.api.dependencies import ResourceId, get_apparel_order_service
from apparel_store.domain.order import ApparelOrderDto
from apparel_store.services.apparel_order_service import ApparelOrderService

router = APIRouter()


@router.get("", response_model=List[ApparelOrderDto])
def get_all_apparel_orders(service: ApparelOrderService = Depends(get_apparel_order_service)):
    """Get all orders with their customer, lines and shipments"""
    return service.list_apparel_orders()


@router.get("/{order_id}", response_model=ApparelOrderDto, responses={404: {"description": "Apparel order not found"}})
def get_apparel_order_by_id(order_id: ResourceId, service: ApparelOrderService = Depends(get_apparel_order_service)):
    order = service.get_apparel_order_by_id(order_id)
    if order is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return order


@router.post("", response_model=ApparelOrderDto, status_code=status.HTTP_201_CREATED)
def create_apparel_order(order_dto: ApparelOrderDto,
                         service: ApparelOrderService = Depends(get_apparel_order_service)):
    """
    Place a new order

    The customer is referenced by `customer.id` and must exist (400
    otherwise). Each line may reference a catalog item by `apparelId`.
    """
    return service.save_apparel_order(order_dto.model_copy(update={"id": None}))


@router.put("/{order_id}", response_model=ApparelOrderDto, responses={404: {"description": "Apparel order not found"}})
def update_apparel_order(order_id: ResourceId, order_dto: ApparelOrderDto,
                         service: ApparelOrderService = Depends(get_apparel_order_service)):
    """Replace the order's fields and lines; shipments are kept"""
    if service.get_apparel_order_by_id(order_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    return service.save_apparel_order(order_dto.model_copy(update={"id": order_id}))


@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT,
               responses={404: {"description": "Apparel order not found"}})
def delete_apparel_order(order_id: ResourceId, service: ApparelOrderService = Depends(get_apparel_order_service)):
    """Delete an order together with its lines and shipments"""
    if service.get_apparel_order_by_id(order_id) is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    service.delete_apparel_order_by_id(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
