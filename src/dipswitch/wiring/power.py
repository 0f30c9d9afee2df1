"""Power: the consumer, unaware of which device backs ``switchable``."""

from dipswitch.container import extern, resource
from dipswitch.devices import Switchable
from dipswitch.switch import PowerSwitch


@extern
def switchable() -> Switchable: ...


@resource
def power_switch(switchable: Switchable) -> PowerSwitch:
    return PowerSwitch(switchable=switchable)
