"""Booking use-cases."""

from typing import Any

from ....config.constants import BOOKING_CONFIRMATION_MESSAGE
from ....core.exceptions import ValidationError
from ....core.protocols import MessagingProvider
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases, invoke_provider
from ..entities.booking import Booking


class BookingUseCases(DomainUseCases[Booking]):
    """Booking creation followed by a confirmation message to the guest."""

    def __init__(
        self,
        base: EntityUseCases[Booking],
        messaging_provider: MessagingProvider,
        strict_side_effects: bool = True,
    ):
        super().__init__(base)
        self.messaging_provider = messaging_provider
        self.strict_side_effects = strict_side_effects

    async def create(self, data: Any, context: UseCaseContext) -> Booking:
        booking = self.parse(data, context)
        if not booking.has_valid_window:
            raise ValidationError.for_field("end_date", "Invalid booking window", self.entity_name)

        async def confirm(record: Booking) -> None:
            await invoke_provider(
                lambda: self.messaging_provider.send_message(
                    record.user_id,
                    BOOKING_CONFIRMATION_MESSAGE,
                    {"booking_id": record.id},
                ),
                use_cases=self.base,
                record=record,
                operation="send_message",
                context=context,
                strict=self.strict_side_effects,
            )

        return await self.base.create(data, context, after_persist=confirm)
