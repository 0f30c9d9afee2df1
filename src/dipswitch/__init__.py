"""
dipswitch: the Dependency Inversion Principle shown with a power switch.

:class:`PowerSwitch` depends on the :class:`Switchable` abstraction, never on
a concrete device. The device is supplied by hand, by the decorator-driven
container in :mod:`dipswitch.container`, or by a test double.
"""

from dipswitch.devices import Fan, LightBulb, LoggingSwitchable, Switchable
from dipswitch.switch import PowerSwitch

__all__ = [
    "Fan",
    "LightBulb",
    "LoggingSwitchable",
    "PowerSwitch",
    "Switchable",
]
