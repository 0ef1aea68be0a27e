# tests/unit/test_history.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from hsmkit.core.errors import InvalidTransitionTargetError
from hsmkit.core.history import (
    deep_history_target,
    shallow_history_target,
    transition_to_deep_history,
    transition_to_shallow_history,
)
from hsmkit.core.transitions import transition_to
from hsmkit.runtime.graph import active_leaf, active_path


def test_shallow_history_of_unvisited_state_is_itself(history_tree, table):
    t = history_tree
    transition_to_shallow_history(t.machine, t.l1, table)
    assert active_leaf(t.machine) is t.l1


def test_shallow_history_remembers_one_level(history_tree, table):
    t = history_tree
    transition_to(t.machine, t.l3, table)
    transition_to(t.machine, t.start, table)

    transition_to_shallow_history(t.machine, t.l1, table)

    assert active_leaf(t.machine) is t.l2
    assert t.l2.active_substate is None


def test_deep_history_of_unvisited_state_is_itself(history_tree, table):
    t = history_tree
    transition_to_deep_history(t.machine, t.l1, table)
    assert active_leaf(t.machine) is t.l1


def test_deep_history_remembers_full_depth(history_tree, table, recorder):
    t = history_tree
    transition_to(t.machine, t.l3, table)
    transition_to(t.machine, t.start, table)
    recorder.clear()

    transition_to_deep_history(t.machine, t.l1, table)

    assert active_leaf(t.machine) is t.l3
    assert active_path(t.machine) == [t.machine, t.l1, t.l2, t.l3]
    assert recorder.calls == [
        ("exit", "Start"),
        ("enter", "L1"),
        ("enter", "L2"),
        ("enter", "L3"),
        ("initialize", "L3"),
    ]


def test_deep_history_of_partially_visited_state(history_tree, table):
    t = history_tree
    transition_to(t.machine, t.l2, table)
    transition_to(t.machine, t.start, table)

    transition_to_deep_history(t.machine, t.l1, table)

    assert active_leaf(t.machine) is t.l2


def test_history_after_shallow_resume_forgets_deeper_levels(history_tree, table):
    t = history_tree
    transition_to(t.machine, t.l3, table)
    transition_to(t.machine, t.start, table)
    transition_to_shallow_history(t.machine, t.l1, table)
    transition_to(t.machine, t.start, table)

    transition_to_deep_history(t.machine, t.l1, table)

    assert active_leaf(t.machine) is t.l2


def test_history_targets_do_not_mutate(history_tree, table):
    t = history_tree
    transition_to(t.machine, t.l3, table)
    transition_to(t.machine, t.start, table)
    before = (t.machine.active_substate, t.l1.active_substate, t.l2.active_substate)

    assert shallow_history_target(t.l1) is t.l2
    assert deep_history_target(t.l1) is t.l3
    assert shallow_history_target(t.l3) is t.l3
    assert (t.machine.active_substate, t.l1.active_substate, t.l2.active_substate) == before


@pytest.mark.parametrize("resolver", [transition_to_shallow_history, transition_to_deep_history])
def test_history_into_other_tree_fails_atomically(history_tree, table, recorder, stranger, resolver):
    t = history_tree
    with pytest.raises(InvalidTransitionTargetError):
        resolver(t.machine, stranger, table)
    assert active_leaf(t.machine) is t.start
    assert recorder.calls == []
