"""Abstract flat registry of every peripheral in the shop.

The registry indexes peripherals that live inside a Computer; it holds the
same objects the computers hold, never copies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.peripheral import Peripheral


class PeripheralRepository(ABC):

    @abstractmethod
    def get_by_id(self, peripheral_id: int) -> Peripheral | None:
        """Return a peripheral by its ID, or None if not registered."""

    @abstractmethod
    def list_all(self) -> list[Peripheral]:
        """Return every registered peripheral in registration order."""

    @abstractmethod
    def save(self, peripheral: Peripheral) -> None:
        """Register a peripheral that is already attached to a computer."""

    @abstractmethod
    def remove(self, peripheral_id: int) -> Peripheral | None:
        """Unregister a peripheral and return it, or None if not registered."""
