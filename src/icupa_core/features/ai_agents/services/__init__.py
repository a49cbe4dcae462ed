"""AI agents services."""

from .ai_agent_use_cases import AiAgentUseCases

__all__ = ["AiAgentUseCases"]
