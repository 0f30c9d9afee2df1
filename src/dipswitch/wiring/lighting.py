"""Lighting: provides a LightBulb as the switchable device."""

from typing import TextIO

from dipswitch.container import extern, resource
from dipswitch.devices import LightBulb, Switchable


@extern
def output() -> TextIO: ...


@resource
def switchable(output: TextIO) -> Switchable:
    return LightBulb(output=output)
