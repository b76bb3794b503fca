"""Application service: Buy Computer use case.

Buying takes the computer out of the shop together with everything
attached to it, so the attached parts leave the flat registries too.
"""

from __future__ import annotations

import logging

from shop.application.dto import ComputerDTO
from shop.application.lookup import require_computer
from shop.domain.repository.component_repository import ComponentRepository
from shop.domain.repository.computer_repository import ComputerRepository
from shop.domain.repository.peripheral_repository import PeripheralRepository

logger = logging.getLogger(__name__)


class BuyComputerHandler:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        component_repo: ComponentRepository,
        peripheral_repo: PeripheralRepository,
    ) -> None:
        self._computer_repo = computer_repo
        self._component_repo = component_repo
        self._peripheral_repo = peripheral_repo

    def handle(self, computer_id: int) -> ComputerDTO:
        computer = require_computer(self._computer_repo, computer_id)

        # Snapshot before anything is unregistered
        dto = ComputerDTO.from_computer(computer)

        for component in computer.components:
            self._component_repo.remove(component.id)
        for peripheral in computer.peripherals:
            self._peripheral_repo.remove(peripheral.id)
        self._computer_repo.remove(computer.id)

        logger.info("Sold computer #%d for %s", computer_id, dto.price)
        return dto
