"""Application service: Buy Best Computer use case (query).

Recommends a computer without selling it; the computer stays registered.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from shop.application.dto import ComputerDTO
from shop.domain.exceptions import ValidationError
from shop.domain.repository.computer_repository import ComputerRepository
from shop.domain.service.computer_selection_service import ComputerSelectionService

logger = logging.getLogger(__name__)


class BuyBestComputerHandler:

    def __init__(self, computer_repo: ComputerRepository) -> None:
        self._selection_service = ComputerSelectionService(computer_repo)

    def handle(self, budget: str | float | int | Decimal) -> ComputerDTO:
        computer = self._selection_service.best_within_budget(_parse_budget(budget))
        logger.debug("Best computer for budget %s is #%d", budget, computer.id)
        return ComputerDTO.from_computer(computer)


def _parse_budget(budget: str | float | int | Decimal) -> Decimal:
    try:
        amount = Decimal(str(budget))
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid budget: {budget!r}") from exc
    if not amount.is_finite():
        raise ValidationError(f"Invalid budget: {budget!r}")
    return amount
