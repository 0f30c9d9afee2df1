"""The high-level consumer of a :class:`~dipswitch.devices.Switchable`."""

import logging
from dataclasses import dataclass
from typing import Final, final

from dipswitch.devices import Switchable

_logger: Final[logging.Logger] = logging.getLogger(__name__)


@final
@dataclass(frozen=True, kw_only=True, slots=True, weakref_slot=True)
class PowerSwitch:
    """
    Operates whatever device it was constructed with.

    The switch never names a concrete device type; the dependency is injected
    through the constructor.
    """

    switchable: Switchable

    def operate(self, on: bool) -> None:
        _logger.debug("Operating %s: on=%s", type(self.switchable).__name__, on)
        if on:
            self.switchable.turn_on()
        else:
            self.switchable.turn_off()
