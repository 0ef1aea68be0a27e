# hsmkit/core/state_machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, TypeVar

from hsmkit.core.dispatcher import dispatch
from hsmkit.core.handlers import HandlerTable
from hsmkit.core.history import transition_to_deep_history, transition_to_shallow_history
from hsmkit.core.transitions import transition_to
from hsmkit.core.validations import Validator
from hsmkit.interfaces.protocols import HsmEvent, HsmState
from hsmkit.interfaces.types import KindSpec
from hsmkit.runtime.graph import active_leaf, active_path

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StateMachine:
    """
    Binds a state tree to its handler table.

    The engine functions work on any state of a tree; this class only saves
    passing the root and the table around and reports failures to the
    ``on_error`` hooks. Exceptions are always re-raised unchanged.
    """

    def __init__(
        self,
        root: HsmState,
        handlers: Optional[HandlerTable] = None,
        hooks: Optional[List[Any]] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        """
        :param root: The root state of the tree.
        :param handlers: Handler table for the chart. A new one is created if omitted.
        :param hooks: Extra observers for this machine. When given, the machine
            uses a copy of ``handlers`` that shares its handlers but adds these
            hooks, so a table shared with other machines keeps its observers.
        :param validator: Validator used to check the tree. Defaults to ``Validator()``.
        :raises ValidationError: If the tree is not well-formed.
        """
        self._validator = validator or Validator()
        self._validator.check(root)

        self._root = root
        table = handlers if handlers is not None else HandlerTable()
        self._handlers = table.with_hooks(hooks) if hooks else table
        self._started = False
        self._nesting = 0

    @property
    def root(self) -> HsmState:
        return self._root

    @property
    def handlers(self) -> HandlerTable:
        return self._handlers

    @property
    def started(self) -> bool:
        return self._started

    @property
    def active_state(self) -> HsmState:
        """The deepest currently active state."""
        return active_leaf(self._root)

    @property
    def active_path(self) -> List[HsmState]:
        """Active states from the root down to the active state."""
        return active_path(self._root)

    def start(self) -> None:
        """
        Initialize the machine by transitioning the root to itself.

        The root's initializer then routes into the initial state. Calling
        ``start`` again does nothing.
        """
        if self._started:
            return
        logger.debug("Starting state machine %r", self._root)
        self._guarded(transition_to, self._root, self._root, self._handlers)
        self._started = True

    def dispatch(self, event: HsmEvent) -> HsmState:
        """Deliver ``event``; returns the state that handled it."""
        return self._guarded(dispatch, self._root, event, self._handlers)

    def transition_to(self, target: HsmState) -> None:
        self._guarded(transition_to, self._root, target, self._handlers)

    def transition_to_shallow_history(self, state: HsmState) -> None:
        self._guarded(transition_to_shallow_history, self._root, state, self._handlers)

    def transition_to_deep_history(self, state: HsmState) -> None:
        self._guarded(transition_to_deep_history, self._root, state, self._handlers)

    # Registration shortcuts
    def on_event(self, state_kind: KindSpec, event_kind: KindSpec) -> Callable[[T], T]:
        return self._handlers.on_event(state_kind, event_kind)

    def on_entry(self, state_kind: KindSpec) -> Callable[[T], T]:
        return self._handlers.on_entry(state_kind)

    def on_exit(self, state_kind: KindSpec) -> Callable[[T], T]:
        return self._handlers.on_exit(state_kind)

    def on_initialize(self, state_kind: KindSpec) -> Callable[[T], T]:
        return self._handlers.on_initialize(state_kind)

    def _guarded(self, operation: Callable[..., T], *args: Any) -> T:
        # Handlers call back into the machine; report an error once, at the outermost call.
        self._nesting += 1
        try:
            return operation(*args)
        except Exception as error:
            if self._nesting == 1:
                self._handlers.hooks.execute_on_error(error)
            raise
        finally:
            self._nesting -= 1
