"""Application service: Show Computer use case (query)."""

from __future__ import annotations

import logging

from shop.application.dto import ComputerDTO
from shop.application.lookup import require_computer
from shop.domain.repository.computer_repository import ComputerRepository

logger = logging.getLogger(__name__)


class ShowComputerHandler:

    def __init__(self, computer_repo: ComputerRepository) -> None:
        self._computer_repo = computer_repo

    def handle(self, computer_id: int) -> ComputerDTO:
        computer = require_computer(self._computer_repo, computer_id)
        logger.debug("Showing computer #%d", computer_id)
        return ComputerDTO.from_computer(computer)
