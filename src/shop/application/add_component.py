"""Application service: Add Component use case.

Coordinates the target Computer aggregate and the flat component
registry. The component is registered only after the computer accepted it,
so a rejected attach leaves both untouched.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.application.dto import PartDTO, part_dto
from shop.application.lookup import require_computer
from shop.domain.exceptions import DuplicateIdError
from shop.domain.model.component import Component
from shop.domain.model.kinds import ComponentKind
from shop.domain.repository.component_repository import ComponentRepository
from shop.domain.repository.computer_repository import ComputerRepository

logger = logging.getLogger(__name__)


class AddComponentHandler:

    def __init__(
        self,
        computer_repo: ComputerRepository,
        component_repo: ComponentRepository,
    ) -> None:
        self._computer_repo = computer_repo
        self._component_repo = component_repo

    def handle(
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
        computer = require_computer(self._computer_repo, computer_id)

        # Ids are unique across all computers, not per computer
        if self._component_repo.get_by_id(component_id) is not None:
            raise DuplicateIdError("Component with this id already exists.")

        kind = ComponentKind.parse(kind_tag)
        component = Component.create(
            id=component_id,
            kind=kind,
            manufacturer=manufacturer,
            model=model,
            price=price,
            overall_performance=overall_performance,
            generation=generation,
        )

        computer.add_component(component)
        self._component_repo.save(component)

        logger.info(
            "Attached %s #%d to computer #%d", kind.value, component_id, computer_id
        )
        return part_dto(component, computer.id)
