"""Order domain entity."""

from typing import ClassVar

from pydantic import Field

from ....config.constants import OrderStatus
from ....core.entities.base import Currency, EntityModel, NonEmptyStr


class Order(EntityModel):
    """Customer order.

    Orders are always created ``pending``; the payment outcome is settled
    outside the create operation.
    """

    entity_name: ClassVar[str] = "order"
    table_name: ClassVar[str] = "orders"

    user_id: NonEmptyStr
    tenant_id: NonEmptyStr
    total_cents: int = Field(ge=0)
    currency: Currency
    status: OrderStatus = OrderStatus.PENDING
