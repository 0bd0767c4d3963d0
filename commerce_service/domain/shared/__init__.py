"""
Shared Kernel for the domain layer.

Base classes and interfaces shared by the user and order aggregates.

Exports:
    - Entity: Base class for all domain entities
    - AggregateRoot: Entity with modification tracking and soft deletion
    - Repository: Base interface for aggregate repositories
"""

from commerce_service.domain.shared.base_entity import AggregateRoot, Entity, utc_now
from commerce_service.domain.shared.repository import Repository

__all__ = [
    "Entity",
    "AggregateRoot",
    "Repository",
    "utc_now",
]
