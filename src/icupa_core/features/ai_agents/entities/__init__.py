"""AI agents entities."""

from .ai_agent import AiAgent

__all__ = ["AiAgent"]
