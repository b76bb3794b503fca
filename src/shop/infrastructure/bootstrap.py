"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from shop.application.controller import CatalogController
from shop.infrastructure.memory.memory_component_repository import (
    InMemoryComponentRepository,
)
from shop.infrastructure.memory.memory_computer_repository import (
    InMemoryComputerRepository,
)
from shop.infrastructure.memory.memory_peripheral_repository import (
    InMemoryPeripheralRepository,
)

LOG_LEVEL_ENV = "SHOP_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def catalog_controller() -> CatalogController:
    """Return a controller over fresh, empty registries."""
    return CatalogController(
        computer_repo=InMemoryComputerRepository(),
        component_repo=InMemoryComponentRepository(),
        peripheral_repo=InMemoryPeripheralRepository(),
    )


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send ``shop`` log records to stderr through rich.

    The level comes from ``SHOP_LOG_LEVEL``; *verbose* forces DEBUG.
    """
    logger = logging.getLogger("shop")
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(
            RichHandler(console=Console(stderr=True), show_path=False)
        )
    return logger
