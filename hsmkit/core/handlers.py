# hsmkit/core/handlers.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar, Union

from hsmkit.core.errors import InitializationDepthError
from hsmkit.core.hooks import HookManager
from hsmkit.core.states import kind_of
from hsmkit.interfaces.types import EventHandler, KindSpec, StateCallback

logger = logging.getLogger(__name__)

DEFAULT_MAX_INITIALIZE_DEPTH = 64

F = TypeVar("F", bound=Callable[..., Any])


class HandlerTable:
    """
    Behavior of a state chart, looked up by kind.

    Event handlers are keyed by ``(state kind, event kind)`` and return a
    truthy value when they handle the event. Entry, exit and initialize
    callbacks are keyed by state kind. Every lookup falls back to a default:
    events are not handled, entry/exit/initialize do nothing.

    Handlers can be registered directly or with the decorator forms::

        table = HandlerTable()

        @table.on_event("Off", "Power")
        def power_on(state, event):
            transition_to_deep_history(machine, on_state, table)
            return True

        @table.on_initialize("On")
        def enter_celsius(state):
            transition_to(machine, celsius, table)
    """

    def __init__(
        self,
        hooks: Union[HookManager, List[Any], None] = None,
        max_initialize_depth: int = DEFAULT_MAX_INITIALIZE_DEPTH,
    ) -> None:
        """
        :param hooks: Observers notified after entry, exit and initialize.
        :param max_initialize_depth: How many initializers may be nested inside
            one another before the chart is considered to be looping.
        :raises ValueError: If max_initialize_depth is less than 1.
        """
        if max_initialize_depth < 1:
            raise ValueError("max_initialize_depth must be at least 1")

        self.hooks = hooks if isinstance(hooks, HookManager) else HookManager(hooks)
        self._max_initialize_depth = max_initialize_depth
        self._initialize_depth = 0

        self._event_handlers: Dict[Tuple[Hashable, Hashable], EventHandler] = {}
        self._entry_handlers: Dict[Hashable, StateCallback] = {}
        self._exit_handlers: Dict[Hashable, StateCallback] = {}
        self._initializers: Dict[Hashable, StateCallback] = {}

    @property
    def max_initialize_depth(self) -> int:
        return self._max_initialize_depth

    def with_hooks(self, hooks: Iterable[Any]) -> HandlerTable:
        """
        Return a table sharing this table's handlers with extra observers.

        Handlers registered on either table are visible to both. The returned
        table has its own :class:`HookManager` holding this table's hooks
        followed by ``hooks``, so this table's observers are left unchanged.
        """
        table = HandlerTable(self.hooks.hooks + list(hooks), self._max_initialize_depth)
        table._event_handlers = self._event_handlers
        table._entry_handlers = self._entry_handlers
        table._exit_handlers = self._exit_handlers
        table._initializers = self._initializers
        return table

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def add_event_handler(self, state_kind: KindSpec, event_kind: KindSpec, handler: EventHandler) -> None:
        """
        Register ``handler(state, event) -> bool`` for an event in a state kind.
        """
        key = (kind_of(state_kind), kind_of(event_kind))
        self._store(self._event_handlers, key, handler, "event handler")

    def add_entry_handler(self, state_kind: KindSpec, handler: StateCallback) -> None:
        self._store(self._entry_handlers, kind_of(state_kind), handler, "entry handler")

    def add_exit_handler(self, state_kind: KindSpec, handler: StateCallback) -> None:
        self._store(self._exit_handlers, kind_of(state_kind), handler, "exit handler")

    def add_initializer(self, state_kind: KindSpec, handler: StateCallback) -> None:
        """
        Register the initializer run after a state kind is transitioned to.

        Composite states use it to transition into their default substate.
        """
        self._store(self._initializers, kind_of(state_kind), handler, "initializer")

    def on_event(self, state_kind: KindSpec, event_kind: KindSpec) -> Callable[[F], F]:
        """Decorator form of :meth:`add_event_handler`."""

        def decorator(func: F) -> F:
            self.add_event_handler(state_kind, event_kind, func)
            return func

        return decorator

    def on_entry(self, state_kind: KindSpec) -> Callable[[F], F]:
        """Decorator form of :meth:`add_entry_handler`."""

        def decorator(func: F) -> F:
            self.add_entry_handler(state_kind, func)
            return func

        return decorator

    def on_exit(self, state_kind: KindSpec) -> Callable[[F], F]:
        """Decorator form of :meth:`add_exit_handler`."""

        def decorator(func: F) -> F:
            self.add_exit_handler(state_kind, func)
            return func

        return decorator

    def on_initialize(self, state_kind: KindSpec) -> Callable[[F], F]:
        """Decorator form of :meth:`add_initializer`."""

        def decorator(func: F) -> F:
            self.add_initializer(state_kind, func)
            return func

        return decorator

    def has_event_handler(self, state_kind: KindSpec, event_kind: KindSpec) -> bool:
        return (kind_of(state_kind), kind_of(event_kind)) in self._event_handlers

    @staticmethod
    def _store(registry: Dict[Any, Any], key: Any, handler: Any, what: str) -> None:
        if not callable(handler):
            raise TypeError(f"{what} for {key!r} must be callable")
        if key in registry:
            logger.warning("Replacing %s for %r", what, key)
        registry[key] = handler

    # -------------------------------------------------------------------------
    # Invocation (used by the engine)
    # -------------------------------------------------------------------------

    def handle_event(self, state: Any, event: Any) -> bool:
        """
        Run the handler for ``(state, event)``. Returns True if it handled the event.
        """
        key = (kind_of(state), kind_of(event))
        handler = self._event_handlers.get(key)
        if handler is None:
            logger.debug("No event handler for %s, event not handled", key)
            return False
        return bool(handler(state, event))

    def enter(self, state: Any) -> None:
        handler = self._entry_handlers.get(kind_of(state))
        logger.debug("on_entry(%s)%s", kind_of(state), "" if handler else " [default]")
        if handler is not None:
            handler(state)
        self.hooks.execute_on_enter(state)

    def exit(self, state: Any) -> None:
        handler = self._exit_handlers.get(kind_of(state))
        logger.debug("on_exit(%s)%s", kind_of(state), "" if handler else " [default]")
        if handler is not None:
            handler(state)
        self.hooks.execute_on_exit(state)

    def initialize(self, state: Any) -> None:
        """
        Run the initializer for ``state``.

        Initializers usually transition again, which runs the next initializer
        from inside this one. Nesting beyond ``max_initialize_depth`` raises
        :class:`InitializationDepthError`.
        """
        handler = self._initializers.get(kind_of(state))
        logger.debug("on_initialize(%s)%s", kind_of(state), "" if handler else " [default]")
        if handler is not None:
            if self._initialize_depth >= self._max_initialize_depth:
                raise InitializationDepthError(kind_of(state), self._max_initialize_depth)
            self._initialize_depth += 1
            try:
                handler(state)
            finally:
                self._initialize_depth -= 1
        self.hooks.execute_on_initialize(state)


default_handlers = HandlerTable()


def resolve_handlers(handlers: Optional[HandlerTable]) -> HandlerTable:
    """Return ``handlers``, or the module-wide table when none is given."""
    return default_handlers if handlers is None else handlers
