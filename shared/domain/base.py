"""
Base Domain Classes

This module provides the foundational building blocks for Domain-Driven Design:
- Entity: Objects with unique identity
- ValueObject: Immutable objects compared by value

Entities are immutable as well: a state change produces a new instance
(``dataclasses.replace``) instead of mutating the one a caller holds.
"""

from abc import ABC
from dataclasses import dataclass, field, replace
from typing import Self
from uuid import UUID, uuid4


@dataclass(frozen=True, eq=False, kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Entities have unique identity.
    Two entities are equal if their IDs are equal.
    """
    id: UUID = field(default_factory=uuid4)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def evolve(self, **changes) -> Self:
        """Return a copy of this entity with the given fields replaced"""
        return replace(self, **changes)


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
