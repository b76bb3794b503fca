"""Lookups shared by the use cases that address a computer by id."""

from __future__ import annotations

from shop.domain.exceptions import UnknownComputerError
from shop.domain.model.computer import Computer
from shop.domain.repository.computer_repository import ComputerRepository


def require_computer(computer_repo: ComputerRepository, computer_id: int) -> Computer:
    computer = computer_repo.get_by_id(computer_id)
    if computer is None:
        raise UnknownComputerError("Computer with this id does not exist.")
    return computer
