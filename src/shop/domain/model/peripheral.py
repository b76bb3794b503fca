"""Peripheral: an external accessory plugged into exactly one computer."""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.exceptions import ValidationError
from shop.domain.model.kinds import PeripheralKind
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money


@dataclass
class Peripheral(Product):

    kind: PeripheralKind
    connection_type: str

    @property
    def type_name(self) -> str:
        return self.kind.value

    def describe(self) -> str:
        return f"{super().describe()} Connection Type: {self.connection_type}"

    @staticmethod
    def create(
        id: int,
        kind: PeripheralKind,
        manufacturer: str,
        model: str,
        price: str | float | int | Money,
        overall_performance: float,
        connection_type: str,
    ) -> Peripheral:
        """Build a new peripheral from caller-supplied values."""
        fields = Product._validated_fields(
            id, manufacturer, model, price, overall_performance
        )
        if not connection_type or not connection_type.strip():
            raise ValidationError("Connection type can not be empty.")
        return Peripheral(*fields, kind=kind, connection_type=connection_type.strip())
