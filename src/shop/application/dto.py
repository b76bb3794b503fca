"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from shop.domain.model.computer import Computer
from shop.domain.model.product import Product
from shop.domain.model.value_objects import two_places


@dataclass(frozen=True)
class PartDTO:
    """Output: a component or peripheral that was attached or detached."""

    kind: str
    id: int
    computer_id: int


@dataclass(frozen=True)
class ComputerDTO:
    """Output: a computer as displayed to the user."""

    id: int
    kind: str
    manufacturer: str
    model: str
    price: str  # formatted, e.g. "700.00"
    overall_performance: float
    component_count: int
    peripheral_count: int
    description: str

    @staticmethod
    def from_computer(computer: Computer) -> ComputerDTO:
        return ComputerDTO(
            id=computer.id,
            kind=computer.type_name,
            manufacturer=computer.manufacturer,
            model=computer.model,
            price=two_places(computer.price.amount),
            overall_performance=computer.overall_performance,
            component_count=len(computer.components),
            peripheral_count=len(computer.peripherals),
            description=computer.describe(),
        )


def part_dto(part: Product, computer_id: int) -> PartDTO:
    return PartDTO(kind=part.type_name, id=part.id, computer_id=computer_id)
