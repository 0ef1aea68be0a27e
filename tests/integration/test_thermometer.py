# tests/integration/test_thermometer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Thermometer chart:

    Thermometer {
        Off   (entry: display "off")
        On    (entry: display "--", Temperature: show converted value) {
            Celsius -> Fahrenheit -> Kelvin -> Celsius   on Units
            [*] --> Celsius
        }
        [*] --> Off
        Off -> On[H*]  on Power
        On  -> Off     on Power
    }

Power-cycling restores the units that were selected before, through deep
history.
"""

from types import SimpleNamespace

import pytest

from hsmkit.core.events import Event
from hsmkit.core.state_machine import StateMachine
from hsmkit.core.states import State


def celsius(t: float) -> str:
    return f"{t:.1f}°C"


def fahrenheit(t: float) -> str:
    return f"{t * 1.8 + 32.0:.1f}°F"


def kelvin(t: float) -> str:
    return f"{t + 273.15:.2f}K"


class Power(Event):
    pass


class Units(Event):
    pass


class Temperature(Event):
    def __init__(self, value: float) -> None:
        super().__init__(payload={"value": value})


class Thermometer:
    def __init__(self) -> None:
        self.display = ""
        self.temperature = None
        self.convert = celsius

    def refresh(self) -> None:
        if self.temperature is not None:
            self.display = self.convert(self.temperature)


def build_thermometer():
    device = Thermometer()

    machine = State("Thermometer")
    off = State("Off", machine)
    on = State("On", machine)
    units = {
        "Celsius": State("Celsius", on),
        "Fahrenheit": State("Fahrenheit", on),
        "Kelvin": State("Kelvin", on),
    }
    sm = StateMachine(machine)

    # The root handles every event so nothing is ever unhandled.
    for event_kind in (Power, Units, Temperature):
        sm.handlers.add_event_handler(machine, event_kind, lambda state, event: True)

    @sm.on_initialize(machine)
    def start_off(state):
        sm.transition_to(off)

    @sm.on_entry(off)
    def show_off(state):
        device.display = "off"

    @sm.on_event(off, Power)
    def power_on(state, event):
        sm.transition_to_deep_history(on)
        return True

    @sm.on_initialize(on)
    def start_celsius(state):
        sm.transition_to(units["Celsius"])

    @sm.on_entry(on)
    def show_dashes(state):
        device.display = "--"

    @sm.on_event(on, Power)
    def power_off(state, event):
        sm.transition_to(off)
        return True

    @sm.on_event(on, Temperature)
    def show_temperature(state, event):
        device.temperature = event.payload["value"]
        device.refresh()
        return True

    cycle = [("Celsius", celsius), ("Fahrenheit", fahrenheit), ("Kelvin", kelvin)]
    for index, (name, converter) in enumerate(cycle):
        following = units[cycle[(index + 1) % len(cycle)][0]]

        def select(state, converter=converter):
            device.convert = converter
            device.refresh()

        def next_units(state, event, following=following):
            sm.transition_to(following)
            return True

        sm.handlers.add_entry_handler(name, select)
        sm.handlers.add_event_handler(name, Units, next_units)

    return SimpleNamespace(device=device, sm=sm, machine=machine, off=off, on=on, **units)


@pytest.fixture
def thermometer():
    t = build_thermometer()
    t.sm.start()
    return t


def test_initialization(thermometer):
    t = thermometer
    assert t.sm.active_state is t.off
    assert t.device.display == "off"


def test_off_ignores_other_events(thermometer):
    t = thermometer
    assert t.sm.dispatch(Units()) is t.machine
    assert t.sm.dispatch(Temperature(20.0)) is t.machine
    assert t.sm.active_state is t.off
    assert t.device.display == "off"


def test_power_on_initializes_into_celsius(thermometer):
    t = thermometer
    t.sm.dispatch(Power())
    assert t.sm.active_state is t.Celsius
    assert t.sm.active_path == [t.machine, t.on, t.Celsius]
    assert t.device.display == "--"


def test_temperature_and_units_cycle(thermometer):
    t = thermometer
    t.sm.dispatch(Power())
    t.sm.dispatch(Temperature(20.0))
    assert t.device.display == "20.0°C"

    t.sm.dispatch(Units())
    assert t.sm.active_state is t.Fahrenheit
    assert t.device.display == "68.0°F"

    t.sm.dispatch(Units())
    assert t.sm.active_state is t.Kelvin
    assert t.device.display == "293.15K"

    t.sm.dispatch(Units())
    assert t.sm.active_state is t.Celsius
    assert t.device.display == "20.0°C"


def test_power_cycle_restores_units(thermometer):
    t = thermometer
    t.sm.dispatch(Power())
    t.sm.dispatch(Temperature(20.0))
    t.sm.dispatch(Units())
    t.sm.dispatch(Units())
    assert t.sm.active_state is t.Kelvin

    t.sm.dispatch(Power())
    assert t.sm.active_state is t.off
    assert t.device.display == "off"

    t.sm.dispatch(Power())
    assert t.sm.active_state is t.Kelvin
    assert t.device.display == "293.15K"
