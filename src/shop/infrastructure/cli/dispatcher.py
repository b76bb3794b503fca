"""Text command dispatcher.

Turns one line such as ``AddComputer DesktopComputer 1 Asus X 500`` into a
CatalogController call and renders the result with the templates in
``shop.infrastructure.cli.messages``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal, InvalidOperation

from shop.application.controller import CatalogController
from shop.domain.exceptions import DomainException
from shop.infrastructure.cli import messages

logger = logging.getLogger(__name__)

CLOSE = "Close"


class CommandError(Exception):
    """A command line could not be parsed."""


class CommandDispatcher:

    def __init__(self, controller: CatalogController) -> None:
        self._controller = controller
        self._commands: dict[str, Callable[[list[str]], str]] = {
            "AddComputer": self._add_computer,
            "AddComponent": self._add_component,
            "RemoveComponent": self._remove_component,
            "AddPeripheral": self._add_peripheral,
            "RemovePeripheral": self._remove_peripheral,
            "BuyComputer": self._buy_computer,
            "BuyBest": self._buy_best,
            "GetComputerData": self._get_computer_data,
            "ListComputers": self._list_computers,
        }

    def execute(self, line: str) -> str:
        """Run one command and return its output.

        Domain errors and malformed commands are reported as the output
        instead of being raised.
        """
        name, *args = line.split() or [""]
        handler = self._commands.get(name)
        if handler is None:
            return messages.UNKNOWN_COMMAND.format(command=name)

        try:
            return handler(args)
        except (DomainException, CommandError) as exc:
            logger.debug("%s failed: %s", name, exc)
            return str(exc)

    def run(self, lines) -> list[str]:
        """Execute lines until ``Close`` or the end of input."""
        outputs: list[str] = []
        for raw in lines:
            line = raw.strip()
            if not line:
                continue
            if line == CLOSE:
                break
            outputs.append(self.execute(line))
        return outputs

    # --- Commands -------------------------------------------------------------

    def _add_computer(self, args: list[str]) -> str:
        _expect(args, "AddComputer", 5, 6)
        kind, computer_id, manufacturer, model, price, *performance = args
        dto = self._controller.add_computer(
            kind,
            _to_int(computer_id, "AddComputer"),
            manufacturer,
            model,
            _to_decimal(price, "AddComputer"),
            _to_float(performance[0], "AddComputer") if performance else None,
        )
        return messages.ADDED_COMPUTER.format(id=dto.id)

    def _add_component(self, args: list[str]) -> str:
        _expect(args, "AddComponent", 8)
        computer_id, part_id, kind, manufacturer, model, price, performance, gen = args
        dto = self._controller.add_component(
            _to_int(computer_id, "AddComponent"),
            _to_int(part_id, "AddComponent"),
            kind,
            manufacturer,
            model,
            _to_decimal(price, "AddComponent"),
            _to_float(performance, "AddComponent"),
            _to_int(gen, "AddComponent"),
        )
        return messages.ADDED_COMPONENT.format(
            kind=dto.kind, id=dto.id, computer_id=dto.computer_id
        )

    def _remove_component(self, args: list[str]) -> str:
        _expect(args, "RemoveComponent", 2)
        kind, computer_id = args
        dto = self._controller.remove_component(
            kind, _to_int(computer_id, "RemoveComponent")
        )
        return messages.REMOVED_COMPONENT.format(kind=dto.kind, id=dto.id)

    def _add_peripheral(self, args: list[str]) -> str:
        _expect(args, "AddPeripheral", 8)
        computer_id, part_id, kind, manufacturer, model, price, performance, conn = args
        dto = self._controller.add_peripheral(
            _to_int(computer_id, "AddPeripheral"),
            _to_int(part_id, "AddPeripheral"),
            kind,
            manufacturer,
            model,
            _to_decimal(price, "AddPeripheral"),
            _to_float(performance, "AddPeripheral"),
            conn,
        )
        return messages.ADDED_PERIPHERAL.format(
            kind=dto.kind, id=dto.id, computer_id=dto.computer_id
        )

    def _remove_peripheral(self, args: list[str]) -> str:
        _expect(args, "RemovePeripheral", 2)
        kind, computer_id = args
        dto = self._controller.remove_peripheral(
            kind, _to_int(computer_id, "RemovePeripheral")
        )
        return messages.REMOVED_PERIPHERAL.format(kind=dto.kind, id=dto.id)

    def _buy_computer(self, args: list[str]) -> str:
        _expect(args, "BuyComputer", 1)
        return self._controller.buy_computer(_to_int(args[0], "BuyComputer")).description

    def _buy_best(self, args: list[str]) -> str:
        _expect(args, "BuyBest", 1)
        budget = _to_decimal(args[0], "BuyBest")
        return self._controller.buy_best_computer(budget).description

    def _get_computer_data(self, args: list[str]) -> str:
        _expect(args, "GetComputerData", 1)
        computer_id = _to_int(args[0], "GetComputerData")
        return self._controller.get_computer_data(computer_id).description

    def _list_computers(self, args: list[str]) -> str:
        _expect(args, "ListComputers", 0)
        computers = self._controller.list_computers()
        if not computers:
            return messages.NO_COMPUTERS
        return "\n".join(c.description.splitlines()[0] for c in computers)


# --- Argument helpers ---------------------------------------------------------


def _expect(args: list[str], command: str, *counts: int) -> None:
    if len(args) not in counts:
        raise CommandError(messages.INVALID_ARGUMENTS.format(command=command))


def _to_int(raw: str, command: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CommandError(messages.INVALID_ARGUMENTS.format(command=command))


def _to_float(raw: str, command: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise CommandError(messages.INVALID_ARGUMENTS.format(command=command))


def _to_decimal(raw: str, command: str) -> Decimal:
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise CommandError(messages.INVALID_ARGUMENTS.format(command=command))
    if not value.is_finite():
        raise CommandError(messages.INVALID_ARGUMENTS.format(command=command))
    return value
