"""In-memory implementation of ComponentRepository.

Keeps a reference to each component; the object itself belongs to the
computer it is attached to.
"""

from __future__ import annotations

from shop.domain.model.component import Component
from shop.domain.repository.component_repository import ComponentRepository


class InMemoryComponentRepository(ComponentRepository):

    def __init__(self) -> None:
        self._store: dict[int, Component] = {}

    def get_by_id(self, component_id: int) -> Component | None:
        return self._store.get(component_id)

    def list_all(self) -> list[Component]:
        return list(self._store.values())

    def save(self, component: Component) -> None:
        self._store[component.id] = component

    def remove(self, component_id: int) -> Component | None:
        return self._store.pop(component_id, None)
