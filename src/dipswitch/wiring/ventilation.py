"""Ventilation: provides a Fan as the switchable device."""

from typing import TextIO

from dipswitch.container import extern, resource
from dipswitch.devices import Fan, Switchable


@extern
def output() -> TextIO: ...


@resource
def switchable(output: TextIO) -> Switchable:
    return Fan(output=output)
