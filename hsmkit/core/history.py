# hsmkit/core/history.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Optional

from hsmkit.core.handlers import HandlerTable
from hsmkit.core.states import kind_of
from hsmkit.core.transitions import transition_to
from hsmkit.interfaces.protocols import HsmState

logger = logging.getLogger(__name__)


def shallow_history_target(state: HsmState) -> HsmState:
    """The last active child of ``state``, or ``state`` itself if it has none."""
    child = state.active_substate
    return state if child is None else child


def deep_history_target(state: HsmState) -> HsmState:
    """Follow the last active substates below ``state`` as far as they go."""
    s = state
    while s.active_substate is not None:
        s = s.active_substate
    return s


def transition_to_shallow_history(
    machine: HsmState, state: HsmState, handlers: Optional[HandlerTable] = None
) -> None:
    """
    Transition into ``state``, resuming its last active child (one level only).

    This is an arrow to a ``[H]`` marker in a UML chart. A state that was
    never entered resolves to itself.

    :raises InvalidTransitionTargetError: If ``state`` is not part of the machine.
    """
    target = shallow_history_target(state)
    logger.debug("transition_to_shallow_history(%s, %s) -> %s", kind_of(machine), kind_of(state), kind_of(target))
    transition_to(machine, target, handlers)


def transition_to_deep_history(
    machine: HsmState, state: HsmState, handlers: Optional[HandlerTable] = None
) -> None:
    """
    Transition into ``state``, resuming the whole chain of substates that was
    active the last time it was left.

    This is an arrow to a ``[H*]`` marker in a UML chart.

    :raises InvalidTransitionTargetError: If ``state`` is not part of the machine.
    """
    target = deep_history_target(state)
    logger.debug("transition_to_deep_history(%s, %s) -> %s", kind_of(machine), kind_of(state), kind_of(target))
    transition_to(machine, target, handlers)
