"""AI agent use-cases."""

from typing import Any, Iterable

from ....core.exceptions import ValidationError
from ....core.shared.context import UseCaseContext
from ....platform.use_cases import DomainUseCases, EntityUseCases
from ..entities.ai_agent import AiAgent


class AiAgentUseCases(DomainUseCases[AiAgent]):
    """AI agent configuration limited to permitted models."""

    def __init__(self, base: EntityUseCases[AiAgent], allowed_models: Iterable[str]):
        super().__init__(base)
        self.allowed_models = frozenset(allowed_models)

    async def create(self, data: Any, context: UseCaseContext) -> AiAgent:
        agent = self.parse(data, context)
        if agent.model not in self.allowed_models:
            raise ValidationError.for_field("model", "Model not permitted", self.entity_name)
        return await self.base.create(data, context)
