"""Audit: logs every call made to the mounted switchable device."""

from dipswitch.container import Endo, patch
from dipswitch.devices import LoggingSwitchable, Switchable


@patch
def switchable() -> Endo[Switchable]:
    return lambda inner: LoggingSwitchable(inner=inner)
