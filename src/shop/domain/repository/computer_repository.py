"""Abstract registry for the Computer aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The in-memory implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.computer import Computer


class ComputerRepository(ABC):

    @abstractmethod
    def get_by_id(self, computer_id: int) -> Computer | None:
        """Return a computer by its ID, or None if not registered."""

    @abstractmethod
    def list_all(self) -> list[Computer]:
        """Return every registered computer in registration order."""

    @abstractmethod
    def save(self, computer: Computer) -> None:
        """Register a new computer."""

    @abstractmethod
    def remove(self, computer_id: int) -> Computer | None:
        """Unregister a computer and return it, or None if not registered."""
