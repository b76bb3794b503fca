"""In-memory implementation of ComputerRepository."""

from __future__ import annotations

from shop.domain.model.computer import Computer
from shop.domain.repository.computer_repository import ComputerRepository


class InMemoryComputerRepository(ComputerRepository):

    def __init__(self, computers: list[Computer] | None = None) -> None:
        # dicts keep insertion order, which is the registration order
        self._store: dict[int, Computer] = {}
        for computer in computers or []:
            self._store[computer.id] = computer

    def get_by_id(self, computer_id: int) -> Computer | None:
        return self._store.get(computer_id)

    def list_all(self) -> list[Computer]:
        return list(self._store.values())

    def save(self, computer: Computer) -> None:
        self._store[computer.id] = computer

    def remove(self, computer_id: int) -> Computer | None:
        return self._store.pop(computer_id, None)
