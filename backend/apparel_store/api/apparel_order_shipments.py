"""
Apparel Order Shipments API Endpoints
Nested under /api/v1/apparel-orders/{order_id}/shipments
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from apparel_store.api.dependencies import ResourceId, get_apparel_order_shipment_service
from apparel_store.domain.order import ApparelOrderShipmentDto
from apparel_store.services.apparel_order_shipment_service import ApparelOrderShipmentService

router = APIRouter()


@router.get("/{order_id}/shipments", response_model=List[ApparelOrderShipmentDto])
def get_all_shipments(order_id: ResourceId,
                      service: ApparelOrderShipmentService = Depends(get_apparel_order_shipment_service)):
    return service.list_shipments(order_id)


@router.get("/{order_id}/shipments/{shipment_id}", response_model=ApparelOrderShipmentDto)
def get_shipment_by_id(order_id: ResourceId, shipment_id: ResourceId,
                       service: ApparelOrderShipmentService = Depends(get_apparel_order_shipment_service)):
    return service.get_shipment_by_id(order_id, shipment_id)


@router.post("/{order_id}/shipments", response_model=ApparelOrderShipmentDto, status_code=status.HTTP_201_CREATED)
def create_shipment(order_id: ResourceId, shipment_dto: ApparelOrderShipmentDto,
                    service: ApparelOrderShipmentService = Depends(get_apparel_order_shipment_service)):
    return service.create_shipment(order_id, shipment_dto.model_copy(update={"id": None}))


@router.put("/{order_id}/shipments/{shipment_id}", response_model=ApparelOrderShipmentDto)
def update_shipment(order_id: ResourceId, shipment_id: ResourceId, shipment_dto: ApparelOrderShipmentDto,
                    service: ApparelOrderShipmentService = Depends(get_apparel_order_shipment_service)):
    return service.update_shipment(order_id, shipment_id, shipment_dto)


@router.delete("/{order_id}/shipments/{shipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_shipment(order_id: ResourceId, shipment_id: ResourceId,
                    service: ApparelOrderShipmentService = Depends(get_apparel_order_shipment_service)):
    service.delete_shipment(order_id, shipment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
