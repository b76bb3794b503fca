"""Abstract flat registry of every component in the shop.

The registry indexes components that live inside a Computer; it holds the
same objects the computers hold, never copies.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.component import Component


class ComponentRepository(ABC):

    @abstractmethod
    def get_by_id(self, component_id: int) -> Component | None:
        """Return a component by its ID, or None if not registered."""

    @abstractmethod
    def list_all(self) -> list[Component]:
        """Return every registered component in registration order."""

    @abstractmethod
    def save(self, component: Component) -> None:
        """Register a component that is already attached to a computer."""

    @abstractmethod
    def remove(self, component_id: int) -> Component | None:
        """Unregister a component and return it, or None if not registered."""
