"""Domain feature modules."""

from .registry import ENTITY_SCHEMAS, ModuleRegistry, build_module_registry

__all__ = ["ENTITY_SCHEMAS", "ModuleRegistry", "build_module_registry"]
