"""Order use-cases."""

import logging
from collections.abc import Mapping
from typing import Any

from ....config.constants import OrderStatus
from ....core.exceptions import ProviderError, ValidationError
from ....core.protocols import PaymentProvider
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases
from ..entities.order import Order

logger = logging.getLogger(__name__)


class OrderUseCases(DomainUseCases[Order]):
    """Order creation with an immediate payment charge.

    The order is persisted as ``pending`` and then charged. A failed charge
    fails the whole create with ``ProviderError``; the stored order stays
    ``pending`` and an ``order.charge_failed`` audit event is written for
    reconciliation.
    """

    def __init__(self, base: EntityUseCases[Order], payment_provider: PaymentProvider):
        super().__init__(base)
        self.payment_provider = payment_provider

    async def create(self, data: Any, context: UseCaseContext) -> Order:
        order = self.parse(data, context)
        if order.total_cents <= 0:
            raise ValidationError.for_field("total_cents", "Order total must be positive", self.entity_name)

        payload = {**dict(data), "status": OrderStatus.PENDING.value} if isinstance(data, Mapping) else data

        async def charge(record: Order) -> None:
            try:
                result = await self.payment_provider.charge(
                    record.total_cents,
                    record.currency,
                    {"order_id": record.id},
                )
            except ProviderError as e:
                logger.error(
                    f"Charge failed for order {record.id}, left pending "
                    f"(correlation_id={context.correlation_id}): {e.message}"
                )
                self.base.audit(
                    f"{self.entity_name}.charge_failed",
                    {"order_id": record.id, "error": e.to_dict()},
                    context,
                )
                raise

            logger.info(f"Order {record.id} charged: {result.get('id')} ({result.get('status')})")

        return await self.base.create(payload, context, after_persist=charge)
