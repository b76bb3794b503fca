"""Domain service: Computer Selection.

Picks the computer a customer should buy for a given budget. It lives in
the domain layer because "best" is a business rule, not presentation.
"""

from __future__ import annotations

from decimal import Decimal

from shop.domain.exceptions import BudgetExceededError
from shop.domain.model.computer import Computer
from shop.domain.model.value_objects import two_places
from shop.domain.repository.computer_repository import ComputerRepository


class ComputerSelectionService:

    def __init__(self, computer_repo: ComputerRepository) -> None:
        self._computer_repo = computer_repo

    def best_within_budget(self, budget: Decimal) -> Computer:
        """Return the highest-performance computer priced at or below *budget*.

        A negative budget matches nothing. Ties go to the computer
        registered first.
        """
        best: Computer | None = None
        for computer in self._computer_repo.list_all():
            if computer.price.amount > budget:
                continue
            if best is None or computer.overall_performance > best.overall_performance:
                best = computer

        if best is None:
            raise BudgetExceededError(
                f"Can't buy a computer with a budget of ${two_places(budget)}."
            )
        return best
