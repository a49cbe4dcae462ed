"""Tenant domain entity."""

from typing import Annotated, ClassVar, Optional

from pydantic import StringConstraints

from ....core.entities.base import EntityModel, NonEmptyStr

TenantSlug = Annotated[
    str,
    StringConstraints(strip_whitespace=True, to_lower=True, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$"),
]


class Tenant(EntityModel):
    """Tenant (merchant, supplier or venue group) sharing the platform."""

    entity_name: ClassVar[str] = "tenant"
    table_name: ClassVar[str] = "tenants"

    name: NonEmptyStr
    slug: TenantSlug
    region: Optional[str] = None
