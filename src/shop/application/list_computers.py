"""Application service: List Computers use case (query)."""

from __future__ import annotations

from shop.application.dto import ComputerDTO
from shop.domain.repository.computer_repository import ComputerRepository


class ListComputersHandler:

    def __init__(self, computer_repo: ComputerRepository) -> None:
        self._computer_repo = computer_repo

    def handle(self) -> list[ComputerDTO]:
        """Return every registered computer in registration order."""
        return [ComputerDTO.from_computer(c) for c in self._computer_repo.list_all()]
