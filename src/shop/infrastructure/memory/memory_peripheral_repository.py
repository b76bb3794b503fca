"""In-memory implementation of PeripheralRepository.

Keeps a reference to each peripheral; the object itself belongs to the
computer it is attached to.
"""

from __future__ import annotations

from shop.domain.model.peripheral import Peripheral
from shop.domain.repository.peripheral_repository import PeripheralRepository


class InMemoryPeripheralRepository(PeripheralRepository):

    def __init__(self) -> None:
        self._store: dict[int, Peripheral] = {}

    def get_by_id(self, peripheral_id: int) -> Peripheral | None:
        return self._store.get(peripheral_id)

    def list_all(self) -> list[Peripheral]:
        return list(self._store.values())

    def save(self, peripheral: Peripheral) -> None:
        self._store[peripheral.id] = peripheral

    def remove(self, peripheral_id: int) -> Peripheral | None:
        return self._store.pop(peripheral_id, None)
