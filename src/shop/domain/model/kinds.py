"""Closed sets of type tags for the things the shop sells.

The enum values are the textual tags used by the command interface and in
every rendered description.
"""

from __future__ import annotations

from enum import Enum

from shop.domain.exceptions import InvalidTypeError


class ComputerKind(Enum):
    DESKTOP = "DesktopComputer"
    LAPTOP = "Laptop"

    @property
    def default_performance(self) -> float:
        """Base performance used when a computer is added without one."""
        return _DEFAULT_PERFORMANCE[self]

    @classmethod
    def parse(cls, tag: str) -> ComputerKind:
        try:
            return cls(tag)
        except ValueError:
            raise InvalidTypeError("Computer type is invalid.") from None


_DEFAULT_PERFORMANCE = {
    ComputerKind.DESKTOP: 15.0,
    ComputerKind.LAPTOP: 10.0,
}


class ComponentKind(Enum):
    CENTRAL_PROCESSING_UNIT = "CentralProcessingUnit"
    MOTHERBOARD = "Motherboard"
    POWER_SUPPLY = "PowerSupply"
    RANDOM_ACCESS_MEMORY = "RandomAccessMemory"
    SOLID_STATE_DRIVE = "SolidStateDrive"
    VIDEO_CARD = "VideoCard"

    @classmethod
    def parse(cls, tag: str) -> ComponentKind:
        try:
            return cls(tag)
        except ValueError:
            raise InvalidTypeError("Component type is invalid.") from None


class PeripheralKind(Enum):
    HEADSET = "Headset"
    KEYBOARD = "Keyboard"
    MONITOR = "Monitor"
    MOUSE = "Mouse"

    @classmethod
    def parse(cls, tag: str) -> PeripheralKind:
        try:
            return cls(tag)
        except ValueError:
            raise InvalidTypeError("Peripheral type is invalid.") from None
