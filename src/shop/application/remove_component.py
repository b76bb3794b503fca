"""Application service: Remove Component use case.

The component detached from the computer is the exact object dropped from
the flat registry, located there by its id.
"""

from __future__ import annotations

import logging

from shop.application.dto import PartDTO, part_dto
from shop.application.lookup import require_computer
from shop.domain.model.kinds import ComponentKind
from shop.domain.repository.component_repository import ComponentRepository
from shop.domain.repository.computer_repository import ComputerRepository

logger = logging.getLogger(__name__)


class RemoveComponentHandler:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        component_repo: ComponentRepository,
    ) -> None:
        self._computer_repo = computer_repo
        self._component_repo = component_repo

    def handle(self, kind_tag: str, computer_id: int) -> PartDTO:
        computer = require_computer(self._computer_repo, computer_id)
        kind = ComponentKind.parse(kind_tag)

        component = computer.remove_component(kind)
        self._component_repo.remove(component.id)

        logger.info(
            "Detached %s #%d from computer #%d", kind.value, component.id, computer_id
        )
        return part_dto(component, computer.id)
