# hsmkit/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Optional

from hsmkit.core.errors import InvalidTransitionTargetError
from hsmkit.core.handlers import HandlerTable, resolve_handlers
from hsmkit.core.states import kind_of
from hsmkit.interfaces.protocols import HsmState
from hsmkit.runtime.graph import active_leaf, lowest_common_ancestor, root_of

logger = logging.getLogger(__name__)


def transition_to(machine: HsmState, target: HsmState, handlers: Optional[HandlerTable] = None) -> None:
    """
    Change the active state of ``machine`` to ``target``.

    States are exited from the active state up to, but not including, the
    common ancestor with ``target``. The active path is then pointed at
    ``target`` and the states below the common ancestor are entered down to
    ``target``. Finally ``target``'s initializer runs, which for a composite
    state transitions again into its default substate.

    Transitioning the active state to itself exits and re-enters it. Doing so
    on a freshly built root is how a machine is initialized.

    Only the active substate of ``target`` is cleared. Active substates further
    down other branches are kept, which is what history transitions resume.

    :param machine: Any state of the machine, usually its root.
    :param target: The destination state.
    :param handlers: Handler table to use. Defaults to the module-wide table.
    :raises InvalidTransitionTargetError: If ``target`` is not part of the
        machine. Nothing has been exited, entered or rewired in that case.
    """
    table = resolve_handlers(handlers)
    logger.debug("transition_to(%s, %s)", kind_of(machine), kind_of(target))

    source = active_leaf(machine)
    common = lowest_common_ancestor(source, target)
    if common is None:
        raise InvalidTransitionTargetError(kind_of(target), kind_of(root_of(machine)))

    if target is source:
        _reenter(target, table)
    else:
        _exit_states(source, common, table)
        _rewire(target, common)
        _enter_states(common, table)

    table.initialize(target)


def _exit_states(state: HsmState, common: HsmState, table: HandlerTable) -> None:
    # Leaf first; the common ancestor stays active.
    while state is not common:
        table.exit(state)
        state = state.parent


def _rewire(target: HsmState, common: HsmState) -> None:
    target.active_substate = None
    state = target
    while state is not common:
        state.parent.active_substate = state
        state = state.parent


def _enter_states(common: HsmState, table: HandlerTable) -> None:
    # Outermost first, ending at the target.
    state = common.active_substate
    while state is not None:
        table.enter(state)
        state = state.active_substate


def _reenter(state: HsmState, table: HandlerTable) -> None:
    table.exit(state)
    state.active_substate = None
    table.enter(state)
