# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from types import SimpleNamespace
from typing import Any, List, Tuple

import pytest

from hsmkit.core.handlers import HandlerTable
from hsmkit.core.states import State
from hsmkit.core.transitions import transition_to


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


class RecordingHook:
    """Hook that records every lifecycle notification as ``(what, state name)``."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Any]] = []

    def on_enter(self, state: State) -> None:
        self.calls.append(("enter", state.name))

    def on_exit(self, state: State) -> None:
        self.calls.append(("exit", state.name))

    def on_initialize(self, state: State) -> None:
        self.calls.append(("initialize", state.name))

    def on_error(self, error: Exception) -> None:
        self.calls.append(("error", type(error).__name__))

    def of(self, what: str) -> List[Any]:
        return [name for kind, name in self.calls if kind == what]

    def clear(self) -> None:
        self.calls.clear()


@pytest.fixture
def recorder() -> RecordingHook:
    return RecordingHook()


@pytest.fixture
def table(recorder: RecordingHook) -> HandlerTable:
    """A handler table with no handlers and a recording hook."""
    return HandlerTable(hooks=[recorder])


@pytest.fixture
def abcde():
    """
    A {
        B
        C { D, E }
    }
    """
    a = State("A")
    b = State("B", a)
    c = State("C", a)
    d = State("D", c)
    e = State("E", c)
    return SimpleNamespace(a=a, b=b, c=c, d=d, e=e)


@pytest.fixture
def history_tree(table: HandlerTable, recorder: RecordingHook):
    """
    Machine {
        Start
        L1 { L2 { L3 } }
    }

    Returned with Start active and the recorder cleared.
    """
    machine = State("Machine")
    start = State("Start", machine)
    l1 = State("L1", machine)
    l2 = State("L2", l1)
    l3 = State("L3", l2)
    transition_to(machine, start, table)
    recorder.clear()
    return SimpleNamespace(machine=machine, start=start, l1=l1, l2=l2, l3=l3)


@pytest.fixture
def stranger() -> State:
    """A state from a different tree."""
    return State("Unreachable")
