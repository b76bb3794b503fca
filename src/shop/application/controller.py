"""Catalog controller: the single entry point of the shop.

Owns the three registries (computers, components, peripherals) and hands
each operation to its use-case handler. Callers never touch the registries
directly.
"""

from __future__ import annotations

from decimal import Decimal

from shop.application.add_component import AddComponentHandler
from shop.application.add_computer import AddComputerHandler
from shop.application.add_peripheral import AddPeripheralHandler
from shop.application.buy_best_computer import BuyBestComputerHandler
from shop.application.buy_computer import BuyComputerHandler
from shop.application.dto import ComputerDTO, PartDTO
from shop.application.list_computers import ListComputersHandler
from shop.application.remove_component import RemoveComponentHandler
from shop.application.remove_peripheral import RemovePeripheralHandler
from shop.application.show_computer import ShowComputerHandler
from shop.domain.repository.component_repository import ComponentRepository
from shop.domain.repository.computer_repository import ComputerRepository
from shop.domain.repository.peripheral_repository import PeripheralRepository


class CatalogController:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        component_repo: ComponentRepository,
        peripheral_repo: PeripheralRepository,
    ) -> None:
        self._add_computer = AddComputerHandler(computer_repo)
        self._add_component = AddComponentHandler(computer_repo, component_repo)
        self._remove_component = RemoveComponentHandler(computer_repo, component_repo)
        self._add_peripheral = AddPeripheralHandler(computer_repo, peripheral_repo)
        self._remove_peripheral = RemovePeripheralHandler(computer_repo, peripheral_repo)
        self._buy_computer = BuyComputerHandler(
            computer_repo, component_repo, peripheral_repo
        )
        self._buy_best_computer = BuyBestComputerHandler(computer_repo)
        self._show_computer = ShowComputerHandler(computer_repo)
        self._list_computers = ListComputersHandler(computer_repo)

    # --- Commands -------------------------------------------------------------

    def add_computer(
        self,
        kind_tag: str,
        computer_id: int,
        manufacturer: str,
        model: str,
        price: str | float | int | Decimal,
        overall_performance: float | None = None,
    ) -> ComputerDTO:
        return self._add_computer.handle(
            kind_tag, computer_id, manufacturer, model, price, overall_performance
        )

    def add_component(
        self,
        computer_id: int,
        component_id: int,
        kind_tag: str,
        manufacturer: str,
        model: str,
        price: str | float | int | Decimal,
        overall_performance: float,
        generation: int,
    ) -> PartDTO:
        return self._add_component.handle(
            computer_id,
            component_id,
            kind_tag,
            manufacturer,
            model,
            price,
            overall_performance,
            generation,
        )

    def remove_component(self, kind_tag: str, computer_id: int) -> PartDTO:
        return self._remove_component.handle(kind_tag, computer_id)

    def add_peripheral(
        self,
        computer_id: int,
        peripheral_id: int,
        kind_tag: str,
        manufacturer: str,
        model: str,
        price: str | float | int | Decimal,
        overall_performance: float,
        connection_type: str,
    ) -> PartDTO:
        return self._add_peripheral.handle(
            computer_id,
            peripheral_id,
            kind_tag,
            manufacturer,
            model,
            price,
            overall_performance,
            connection_type,
        )

    def remove_peripheral(self, kind_tag: str, computer_id: int) -> PartDTO:
        return self._remove_peripheral.handle(kind_tag, computer_id)

    def buy_computer(self, computer_id: int) -> ComputerDTO:
        return self._buy_computer.handle(computer_id)

    # --- Queries --------------------------------------------------------------

    def buy_best_computer(
        self, budget: str | float | int | Decimal
    ) -> ComputerDTO:
        return self._buy_best_computer.handle(budget)

    def get_computer_data(self, computer_id: int) -> ComputerDTO:
        return self._show_computer.handle(computer_id)

    def list_computers(self) -> list[ComputerDTO]:
        return self._list_computers.handle()
