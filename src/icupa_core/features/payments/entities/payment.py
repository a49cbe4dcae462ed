"""Payment domain entity."""

from typing import ClassVar, Optional

from pydantic import Field

from ....config.constants import PaymentStatus
from ....core.entities.base import Currency, EntityModel, NonEmptyStr


class Payment(EntityModel):
    """Ledger record of a payment against an order."""

    entity_name: ClassVar[str] = "payment"
    table_name: ClassVar[str] = "payments"

    order_id: NonEmptyStr
    amount_cents: int = Field(ge=0)
    currency: Currency
    status: PaymentStatus = PaymentStatus.PENDING
    provider_reference: Optional[str] = None
