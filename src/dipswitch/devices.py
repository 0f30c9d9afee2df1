"""
Switchable capability and the devices that implement it.

A consumer such as :class:`dipswitch.switch.PowerSwitch` depends only on
:class:`Switchable`; which device sits behind it is decided by whoever
constructs the consumer.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Final, TextIO, final

from typing_extensions import override

_logger: Final[logging.Logger] = logging.getLogger(__name__)


class Switchable(ABC):
    """Anything that can be turned on and off."""

    __slots__ = ()

    @abstractmethod
    def turn_on(self) -> None:
        """Emit the "on" signal."""

    @abstractmethod
    def turn_off(self) -> None:
        """Emit the "off" signal."""


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class LightBulb(Switchable):
    output: TextIO | None = None
    """Stream to print to. ``None`` means the current ``sys.stdout``."""

    @override
    def turn_on(self) -> None:
        print("LightBulb: Bulb turned on...", file=self.output)

    @override
    def turn_off(self) -> None:
        print("LightBulb: Bulb turned off...", file=self.output)


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class Fan(Switchable):
    output: TextIO | None = None
    """Stream to print to. ``None`` means the current ``sys.stdout``."""

    @override
    def turn_on(self) -> None:
        print("Fan: Fan turned on...", file=self.output)

    @override
    def turn_off(self) -> None:
        print("Fan: Fan turned off...", file=self.output)


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class LoggingSwitchable(Switchable):
    """Logs every call before delegating to the wrapped device."""

    inner: Switchable

    @override
    def turn_on(self) -> None:
        _logger.info("Turning on %s", type(self.inner).__name__)
        self.inner.turn_on()

    @override
    def turn_off(self) -> None:
        _logger.info("Turning off %s", type(self.inner).__name__)
        self.inner.turn_off()
