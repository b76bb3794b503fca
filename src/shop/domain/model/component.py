"""Component: an internal part that goes inside exactly one computer."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.kinds import ComponentKind
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


@dataclass
class Component(Product):

    kind: ComponentKind
    generation: int

    @property
    def type_name(self) -> str:
        return self.kind.value

    def describe(self) -> str:
        return f"{super().describe()} Generation: {self.generation}"

    @staticmethod
    def create(
        id: int,
        kind: ComponentKind,
        manufacturer: str,
        model: str,
        price: str | float | int | Money,
        overall_performance: float,
        generation: int,
    ) -> Component:
        """Build a new component from caller-supplied values."""
        fields = Product._validated_fields(
            id, manufacturer, model, price, overall_performance
        )
        return Component(*fields, kind=kind, generation=generation)
