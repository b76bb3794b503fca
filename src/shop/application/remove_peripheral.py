"""Application service: Remove Peripheral use case."""

from __future__ import annotations

import logging

from shop.application.dto import PartDTO, part_dto
from shop.application.lookup import require_computer
from shop.domain.model.kinds import PeripheralKind
from shop.domain.repository.computer_repository import ComputerRepository
from shop.domain.repository.peripheral_repository import PeripheralRepository

logger = logging.getLogger(__name__)


class RemovePeripheralHandler:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        peripheral_repo: PeripheralRepository,
    ) -> None:
        self._computer_repo = computer_repo
        self._peripheral_repo = peripheral_repo

    def handle(self, kind_tag: str, computer_id: int) -> PartDTO:
        computer = require_computer(self._computer_repo, computer_id)
        kind = PeripheralKind.parse(kind_tag)

        peripheral = computer.remove_peripheral(kind)
        self._peripheral_repo.remove(peripheral.id)

        logger.info(
            "Detached %s #%d from computer #%d", kind.value, peripheral.id, computer_id
        )
        return part_dto(peripheral, computer.id)
