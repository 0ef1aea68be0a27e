# hsmkit/core/dispatcher.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Optional

from hsmkit.core.errors import UnhandledEventError
from hsmkit.core.handlers import HandlerTable, resolve_handlers
from hsmkit.core.states import kind_of
from hsmkit.interfaces.protocols import HsmEvent, HsmState
from hsmkit.runtime.graph import active_leaf, root_of

logger = logging.getLogger(__name__)


def dispatch(machine: HsmState, event: HsmEvent, handlers: Optional[HandlerTable] = None) -> HsmState:
    """
    Pass ``event`` to the machine for processing.

    The active state's handler runs first; while handlers report the event as
    not handled it bubbles to each parent in turn. The first handler that
    handles it ends the dispatch, so ancestors never see that event.

    :param machine: Any state of the machine, usually its root.
    :param event: The event to deliver.
    :param handlers: Handler table to use. Defaults to the module-wide table.
    :return: The state whose handler handled the event.
    :raises UnhandledEventError: If no state up to the root handled the event.
    """
    table = resolve_handlers(handlers)
    logger.debug("dispatch(%s, %s)", kind_of(machine), kind_of(event))

    state: Optional[HsmState] = active_leaf(machine)
    while state is not None:
        if table.handle_event(state, event):
            logger.debug("Event %s handled by %s", kind_of(event), kind_of(state))
            return state
        state = state.parent

    raise UnhandledEventError(kind_of(event), kind_of(root_of(machine)))
