"""
The power switch example wired three ways.

- :func:`manual_injection` builds the object graph by hand.
- :func:`container_injection` lets the container build it from the
  :mod:`dipswitch.wiring` components.
- The third way, testing :class:`~dipswitch.switch.PowerSwitch` against a
  test double, lives in the test suite.
"""

import logging
from types import ModuleType
from typing import Final, TextIO

from dipswitch.container import resolve_root
from dipswitch.devices import LightBulb
from dipswitch.switch import PowerSwitch
from dipswitch.wiring import console, lighting, power

_logger: Final[logging.Logger] = logging.getLogger(__name__)


def manual_injection(on: bool, output: TextIO | None = None) -> None:
    power_switch = PowerSwitch(switchable=LightBulb(output=output))
    power_switch.operate(on)


def container_injection(
    on: bool, *components: ModuleType | type, output: TextIO | None = None
) -> None:
    """
    Resolve ``power_switch`` from the wiring components and operate it.

    :param components: Components providing ``switchable``. Defaults to
        :mod:`dipswitch.wiring.lighting`.
    :param output: Stream to print to instead of mounting
        :mod:`dipswitch.wiring.console`.
    """
    devices = components or (lighting,)
    if output is None:
        root = resolve_root(console, power, *devices)
    else:
        root = resolve_root(power, *devices)(output=output)
    root.power_switch.operate(on)


def main() -> None:
    _logger.debug("Running manual injection")
    manual_injection(True)
    manual_injection(False)
    _logger.debug("Running container injection")
    container_injection(True)
    container_injection(False)
