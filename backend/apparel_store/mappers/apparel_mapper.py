"""
Apparel Mapper

Converts between the Apparel entity and its DTOs. Identity, version,
timestamps and the order-line collection are never copied onto an entity.
"""
from apparel_store.domain.apparel import ApparelDto, ApparelPatchDto
from apparel_store.mappers.base import copy_fields
from apparel_store.models.apparel import Apparel


class ApparelMapper:
    """Mapper for Apparel entity and ApparelDto / ApparelPatchDto"""

    SCALAR_FIELDS = (
        "apparel_name",
        "apparel_style",
        "upc",
        "quantity_on_hand",
        "description",
        "price",
    )

    def to_dto(self, apparel: Apparel) -> ApparelDto:
        return ApparelDto(
            id=apparel.id,
            version=apparel.version,
            created_date=apparel.created_date,
            update_date=apparel.update_date,
            apparel_name=apparel.apparel_name,
            apparel_style=apparel.apparel_style,
            upc=apparel.upc,
            quantity_on_hand=apparel.quantity_on_hand,
            description=apparel.description,
            price=apparel.price,
        )

    def to_entity(self, apparel_dto: ApparelDto) -> Apparel:
        """Build a new, not yet persisted entity from a DTO"""
        return copy_fields(apparel_dto, Apparel(), self.SCALAR_FIELDS)

    def update_from_dto(self, apparel_dto: ApparelDto, apparel: Apparel) -> Apparel:
        """
        Full update: overwrite every scalar field of an existing entity

        A None in the DTO clears the field.
        """
        return copy_fields(apparel_dto, apparel, self.SCALAR_FIELDS)

    def update_from_patch(self, patch_dto: ApparelPatchDto, apparel: Apparel) -> Apparel:
        """
        Partial update: copy only the fields present in the patch

        A None in the patch leaves the stored value unchanged.
        """
        return copy_fields(patch_dto, apparel, self.SCALAR_FIELDS, skip_none=True)
