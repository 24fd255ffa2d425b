"""
Base Domain Classes

Foundational building blocks shared by the domain packages:
- Entity: Objects with unique identity
- ValueObject: Immutable objects compared by value
"""

from abc import ABC
from dataclasses import dataclass
from typing import Optional


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Entities have unique identity assigned by the store that persists them.
    Two entities are equal if their IDs are equal. Entities that were not
    persisted yet (id is None) are only equal to themselves.

    The hash of an unsaved entity changes once the store assigns its id,
    so do not use unsaved entities as set members or dict keys.
    """
    id: Optional[int] = None

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash((self.__class__, self.id))


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
