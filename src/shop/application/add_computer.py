"""Application service: Add Computer use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.application.dto import ComputerDTO
from shop.domain.exceptions import DuplicateIdError
from shop.domain.model.computer import Computer
from shop.domain.model.kinds import ComputerKind
from shop.domain.repository.computer_repository import ComputerRepository

logger = logging.getLogger(__name__)


class AddComputerHandler:

    def __init__(self, computer_repo: ComputerRepository) -> None:
        self._computer_repo = computer_repo

    def handle(
        self,
        kind_tag: str,
        computer_id: int,
        manufacturer: str,
        model: str,
        price: str | float | int | Decimal,
        overall_performance: float | None = None,
    ) -> ComputerDTO:
        """Register a new desktop or laptop with nothing attached."""
        if self._computer_repo.get_by_id(computer_id) is not None:
            raise DuplicateIdError("Computer with this id already exists.")

        kind = ComputerKind.parse(kind_tag)
        computer = Computer.create(
            id=computer_id,
            kind=kind,
            manufacturer=manufacturer,
            model=model,
            price=price,
            overall_performance=overall_performance,
        )
        self._computer_repo.save(computer)

        logger.info("Added %s #%d", kind.value, computer_id)
        return ComputerDTO.from_computer(computer)
