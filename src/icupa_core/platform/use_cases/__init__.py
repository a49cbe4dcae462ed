"""Generic entity use-cases and their composition helpers."""

from .entity_use_cases import EntityUseCases, create_use_cases, schema_issues
from .domain_use_cases import DomainUseCases
from .side_effects import invoke_provider

__all__ = [
    "EntityUseCases",
    "create_use_cases",
    "schema_issues",
    "DomainUseCases",
    "invoke_provider",
]
