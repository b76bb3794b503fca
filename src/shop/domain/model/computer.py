"""Computer aggregate: the core of the domain.

A Computer owns the components and peripherals attached to it and is the
only place that enforces the one-item-per-kind rule. Price and performance
are derived from the attached items on every access.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shop.domain.exceptions import DuplicateTypeError, NotFoundError
from shop.domain.model.component import Component
from shop.domain.model.kinds import ComponentKind, ComputerKind, PeripheralKind
from shop.domain.model.peripheral import Peripheral
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money, two_places


@dataclass
class Computer(Product):
    """Aggregate root for a desktop or a laptop.

    Invariants:
    - at most one attached component per ``ComponentKind``
    - at most one attached peripheral per ``PeripheralKind``

    Use ``Computer.create()`` for new computers; ``__init__`` only stores
    what it is given.
    """

    kind: ComputerKind
    components: list[Component] = field(default_factory=list)
    peripherals: list[Peripheral] = field(default_factory=list)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        id: int,
        kind: ComputerKind,
        manufacturer: str,
        model: str,
        price: str | float | int | Money,
        overall_performance: float | None = None,
    ) -> Computer:
        if overall_performance is None:
            overall_performance = kind.default_performance
        fields = Product._validated_fields(
            id, manufacturer, model, price, overall_performance
        )
        return Computer(*fields, kind=kind)

    # --- Derived values -------------------------------------------------------

    @property
    def type_name(self) -> str:
        return self.kind.value

    @property
    def price(self) -> Money:
        total = self.base_price
        for component in self.components:
            total = total + component.price
        for peripheral in self.peripherals:
            total = total + peripheral.price
        return total

    @property
    def overall_performance(self) -> float:
        if not self.components:
            return self.base_performance
        average = sum(c.overall_performance for c in self.components) / len(
            self.components
        )
        return self.base_performance + average

    @property
    def peripherals_average_performance(self) -> float:
        if not self.peripherals:
            return 0.0
        return sum(p.overall_performance for p in self.peripherals) / len(
            self.peripherals
        )

    # --- Components -----------------------------------------------------------

    def add_component(self, component: Component) -> None:
        for attached in self.components:
            if attached.kind == component.kind:
                raise DuplicateTypeError(
                    f"Component {component.type_name} already exists in "
                    f"{self.type_name} with Id {self.id}."
                )
        self.components.append(component)

    def remove_component(self, kind: ComponentKind) -> Component:
        return self.components.pop(self._component_index(kind))

    # --- Peripherals ----------------------------------------------------------

    def add_peripheral(self, peripheral: Peripheral) -> None:
        for attached in self.peripherals:
            if attached.kind == peripheral.kind:
                raise DuplicateTypeError(
                    f"Peripheral {peripheral.type_name} already exists in "
                    f"{self.type_name} with Id {self.id}."
                )
        self.peripherals.append(peripheral)

    def remove_peripheral(self, kind: PeripheralKind) -> Peripheral:
        return self.peripherals.pop(self._peripheral_index(kind))

    # --- Display --------------------------------------------------------------

    def describe(self) -> str:
        lines = [super().describe(), f" Components ({len(self.components)}):"]
        lines.extend(f"  {c.describe()}" for c in self.components)
        lines.append(
            f" Peripherals ({len(self.peripherals)}); Average Overall Performance "
            f"({two_places(self.peripherals_average_performance)}):"
        )
        lines.extend(f"  {p.describe()}" for p in self.peripherals)
        return "\n".join(lines)

    # --- Internal helpers -----------------------------------------------------

    def _component_index(self, kind: ComponentKind) -> int:
        # Scans the whole list; the first match wins.
        index = None
        for i, component in enumerate(self.components):
            if component.kind == kind and index is None:
                index = i
        if index is None:
            raise NotFoundError(
                f"Component {kind.value} does not exist in "
                f"{self.type_name} with Id {self.id}."
            )
        return index

    def _peripheral_index(self, kind: PeripheralKind) -> int:
        index = None
        for i, peripheral in enumerate(self.peripherals):
            if peripheral.kind == kind and index is None:
                index = i
        if index is None:
            raise NotFoundError(
                f"Peripheral {kind.value} does not exist in "
                f"{self.type_name} with Id {self.id}."
            )
        return index
