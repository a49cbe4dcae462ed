"""Listing domain entity."""

from typing import ClassVar

from pydantic import Field

from ....core.entities.base import Currency, EntityModel, NonEmptyStr


class Listing(EntityModel):
    """Bookable or purchasable offer published by a tenant."""

    entity_name: ClassVar[str] = "listing"
    table_name: ClassVar[str] = "listings"

    tenant_id: NonEmptyStr
    title: NonEmptyStr
    description: str = ""
    price_cents: int = Field(ge=0)
    currency: Currency
