import logging
from dataclasses import fields
from unittest.mock import NonCallableMagicMock

import pytest
from typing_extensions import override

from dipswitch.devices import Switchable
from dipswitch.switch import PowerSwitch


class CountingSwitchable(Switchable):
    """Hand-written test double recording every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    @override
    def turn_on(self) -> None:
        self.calls.append("on")

    @override
    def turn_off(self) -> None:
        self.calls.append("off")


class TestOperateWithMock:
    """PowerSwitch dispatches to the injected dependency."""

    def test_operate_true_turns_on_once(
        self, switchable_double: NonCallableMagicMock
    ) -> None:
        PowerSwitch(switchable=switchable_double).operate(True)
        switchable_double.turn_on.assert_called_once_with()
        switchable_double.turn_off.assert_not_called()

    def test_operate_false_turns_off_once(
        self, switchable_double: NonCallableMagicMock
    ) -> None:
        PowerSwitch(switchable=switchable_double).operate(False)
        switchable_double.turn_off.assert_called_once_with()
        switchable_double.turn_on.assert_not_called()

    def test_repeated_operation_dispatches_each_time(
        self, switchable_double: NonCallableMagicMock
    ) -> None:
        power_switch = PowerSwitch(switchable=switchable_double)
        power_switch.operate(True)
        power_switch.operate(True)
        power_switch.operate(False)
        assert switchable_double.turn_on.call_count == 2
        assert switchable_double.turn_off.call_count == 1


class TestSubstitution:
    """Any Switchable works without modifying PowerSwitch."""

    @pytest.mark.parametrize(
        ("sequence", "expected"),
        [
            ((True,), ["on"]),
            ((False,), ["off"]),
            ((True, False, True), ["on", "off", "on"]),
        ],
    )
    def test_hand_written_double(
        self, sequence: tuple[bool, ...], expected: list[str]
    ) -> None:
        double = CountingSwitchable()
        power_switch = PowerSwitch(switchable=double)
        for on in sequence:
            power_switch.operate(on)
        assert double.calls == expected

    def test_switch_holds_only_its_dependency(
        self, switchable_double: NonCallableMagicMock
    ) -> None:
        power_switch = PowerSwitch(switchable=switchable_double)
        assert power_switch.switchable is switchable_double
        assert [f.name for f in fields(PowerSwitch)] == ["switchable"]


class TestLogging:
    @pytest.mark.parametrize("on", [True, False])
    def test_dispatch_logged_at_debug(
        self, on: bool, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="dipswitch.switch")
        PowerSwitch(switchable=CountingSwitchable()).operate(on)
        assert caplog.messages == [f"Operating CountingSwitchable: on={on}"]
        assert caplog.records[0].levelno == logging.DEBUG
