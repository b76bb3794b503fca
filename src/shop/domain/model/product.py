"""Product base: identity and pricing fields shared by everything sold.

Leaf products (components and peripherals) report their own price and
performance; the Computer aggregate overrides both with derived values.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, two_places


@dataclass
class Product(ABC):
    """Common fields of every sellable item.

    ``base_price`` and ``base_performance`` are the values the item was
    registered with. Read ``price`` and ``overall_performance`` instead:
    those are what the shop actually reports.
    """

    id: int
    manufacturer: str
    model: str
    base_price: Money
    base_performance: float

    @property
    @abstractmethod
    def type_name(self) -> str:
        """The kind tag, e.g. ``Motherboard`` or ``Laptop``."""

    @property
    def price(self) -> Money:
        return self.base_price

    @property
    def overall_performance(self) -> float:
        return self.base_performance

    def describe(self) -> str:
        return (
            f"Overall Performance: {two_places(self.overall_performance)}. "
            f"Price: {two_places(self.price.amount)} - "
            f"{self.type_name}: {self.manufacturer} {self.model} (Id: {self.id})"
        )

    # --- Validation shared by the ``create`` factories ------------------------

    @staticmethod
    def _validated_fields(
        id: int,
        manufacturer: str,
        model: str,
        price: str | float | int | Money,
        overall_performance: float,
    ) -> tuple[int, str, str, Money, float]:
        """Check caller-supplied values and return them normalised."""
        if not isinstance(id, int) or id <= 0:
            raise ValidationError("Id can not be less or equal than 0.")
        if not manufacturer or not manufacturer.strip():
            raise ValidationError("Manufacturer can not be empty.")
        if not model or not model.strip():
            raise ValidationError("Model can not be empty.")
        money = price if isinstance(price, Money) else Money.of(price)
        if not math.isfinite(overall_performance) or overall_performance < 0:
            raise ValidationError("Overall Performance must be a non-negative number.")
        return id, manufacturer.strip(), model.strip(), money, float(overall_performance)
