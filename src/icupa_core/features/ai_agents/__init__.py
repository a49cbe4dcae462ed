"""AI agents feature."""

from .entities import AiAgent
from .services import AiAgentUseCases

__all__ = ["AiAgent", "AiAgentUseCases"]
