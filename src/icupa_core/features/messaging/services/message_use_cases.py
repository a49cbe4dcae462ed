"""Messaging use-cases."""

from typing import Any

from ....core.protocols import MessagingProvider
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases, invoke_provider
from ..entities.message import Message


class MessageUseCases(DomainUseCases[Message]):
    """Records an outbound message and delivers it."""

    def __init__(
        self,
        base: EntityUseCases[Message],
        messaging_provider: MessagingProvider,
        strict_side_effects: bool = True,
    ):
        super().__init__(base)
        self.messaging_provider = messaging_provider
        self.strict_side_effects = strict_side_effects

    async def create(self, data: Any, context: UseCaseContext) -> Message:
        async def deliver(message: Message) -> None:
            await invoke_provider(
                lambda: self.messaging_provider.send_message(
                    message.destination,
                    message.body,
                    {"message_id": message.id},
                ),
                use_cases=self.base,
                record=message,
                operation="send_message",
                context=context,
                strict=self.strict_side_effects,
            )

        return await self.base.create(data, context, after_persist=deliver)
