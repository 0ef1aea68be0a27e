# hsmkit/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from collections import abc
from typing import Any, Hashable, List, Optional, Tuple

from hsmkit.core.base import StateInfo


class State:
    """
    A node in the state tree.

    Hierarchy is fixed at construction: ``parent`` is given once and the new
    state appends itself to the parent's children. The only runtime data the
    engine touches is ``active_substate``.

    Behavior is not attached to the state itself. Entry, exit, initialize and
    event handlers are looked up by ``kind`` in a
    :class:`~hsmkit.core.handlers.HandlerTable`, so several states may share a
    kind and therefore share handlers.
    """

    def __init__(self, name: str, parent: Optional[State] = None, kind: Optional[Hashable] = None) -> None:
        """
        :param name: Name identifying this state within its machine.
        :param parent: The containing state, or None for the machine's root.
        :param kind: Discriminator for handler lookup, any hashable value (a
            string, an enum member...). Defaults to ``name``.
        :raises ValueError: If the name or a string kind is empty, or the parent
            is not a State.
        :raises TypeError: If the kind is not hashable.
        """
        if not name or not isinstance(name, str):
            raise ValueError("State name must be a non-empty string")
        if parent is not None and not isinstance(parent, State):
            raise ValueError(f"Parent of state '{name}' must be a State, got {type(parent).__name__}")

        self._name = name
        self._kind = name if kind is None else check_kind(kind, f"Kind of state '{name}'")
        self._info = StateInfo(parent)
        self._children: List[State] = []

        if parent is not None:
            parent._children.append(self)

    def __repr__(self) -> str:
        return f"State({self._name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> Hashable:
        return self._kind

    @property
    def state_info(self) -> StateInfo:
        """The embedded record holding the tree links."""
        return self._info

    @property
    def parent(self) -> Optional[State]:
        return self._info.parent

    @property
    def active_substate(self) -> Optional[State]:
        return self._info.active_substate

    @active_substate.setter
    def active_substate(self, state: Optional[State]) -> None:
        self._info.active_substate = state

    @property
    def children(self) -> Tuple[State, ...]:
        """Child states in the order they were constructed."""
        return tuple(self._children)

    @property
    def is_root(self) -> bool:
        return self._info.parent is None


def check_kind(kind: Any, what: str) -> Hashable:
    """
    Return ``kind`` if it can be used as a handler-lookup key.

    :raises TypeError: If the kind is not hashable.
    :raises ValueError: If the kind is an empty string.
    """
    if not isinstance(kind, abc.Hashable):
        raise TypeError(f"{what} must be hashable, got {type(kind).__name__}")
    if isinstance(kind, str) and not kind:
        raise ValueError(f"{what} must not be an empty string")
    return kind


def kind_of(obj: Any) -> Hashable:
    """
    Return the handler-lookup discriminator for a state or event.

    Classes contribute their name. States and events contribute their
    ``kind``; a state object without one falls back to its class name. Any
    other value (a string, an enum member, a number) is a kind already and is
    returned as it is.
    """
    if isinstance(obj, type):
        return obj.__name__
    kind = getattr(obj, "kind", None)
    if kind is not None:
        return kind
    if hasattr(obj, "parent") and hasattr(obj, "active_substate"):
        return type(obj).__name__
    return obj
