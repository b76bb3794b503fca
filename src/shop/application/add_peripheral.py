"""Application service: Add Peripheral use case.

Coordinates the target Computer aggregate and the flat peripheral
registry. The peripheral is registered only after the computer accepted it,
so a rejected attach leaves both untouched.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.application.dto import PartDTO, part_dto
from shop.application.lookup import require_computer
from shop.domain.exceptions import DuplicateIdError
from shop.domain.model.kinds import PeripheralKind
from shop.domain.model.peripheral import Peripheral
from shop.domain.repository.computer_repository import ComputerRepository
from shop.domain.repository.peripheral_repository import PeripheralRepository

logger = logging.getLogger(__name__)


class AddPeripheralHandler:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        peripheral_repo: PeripheralRepository,
    ) -> None:
        self._computer_repo = computer_repo
        self._peripheral_repo = peripheral_repo

    def handle(
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
        computer = require_computer(self._computer_repo, computer_id)

        # Ids are unique across all computers, not per computer
        if self._peripheral_repo.get_by_id(peripheral_id) is not None:
            raise DuplicateIdError("Peripheral with this id already exists.")

        kind = PeripheralKind.parse(kind_tag)
        peripheral = Peripheral.create(
            id=peripheral_id,
            kind=kind,
            manufacturer=manufacturer,
            model=model,
            price=price,
            overall_performance=overall_performance,
            connection_type=connection_type,
        )

        computer.add_peripheral(peripheral)
        self._peripheral_repo.save(peripheral)

        logger.info(
            "Attached %s #%d to computer #%d", kind.value, peripheral_id, computer_id
        )
        return part_dto(peripheral, computer.id)
