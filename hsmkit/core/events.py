# hsmkit/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from types import MappingProxyType
from typing import Any, Hashable, Mapping, Optional

from hsmkit.core.states import check_kind


class Event:
    """
    Represents a signal delivered to the state machine. Only ``kind`` is read
    by the engine; the payload belongs to the application's handlers.

    Events are immutable. Application event types may subclass ``Event``; a
    subclass that does not pass a kind is identified by its class name::

        class Temperature(Event):
            def __init__(self, celsius: float) -> None:
                super().__init__(payload={"celsius": celsius})
    """

    __slots__ = ("_kind", "_payload")

    def __init__(self, kind: Optional[Hashable] = None, payload: Optional[Mapping[str, Any]] = None) -> None:
        """
        :param kind: A hashable value identifying this event, usually a string
            or an enum member. Defaults to the class name.
        :param payload: Optional data for handlers. Copied and frozen.
        :raises TypeError: If the kind is not hashable.
        :raises ValueError: If the kind is an empty string.
        """
        if kind is None:
            kind = type(self).__name__
        object.__setattr__(self, "_kind", check_kind(kind, "Event kind"))
        object.__setattr__(self, "_payload", MappingProxyType(dict(payload or {})))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self._kind == other._kind and dict(self._payload) == dict(other._payload)

    def __hash__(self) -> int:
        return hash(self._kind)

    def __repr__(self) -> str:
        if self._payload:
            return f"{type(self).__name__}({self._kind!r}, {dict(self._payload)!r})"
        return f"{type(self).__name__}({self._kind!r})"

    @property
    def kind(self) -> Hashable:
        """The discriminator used for handler lookup."""
        return self._kind

    @property
    def payload(self) -> Mapping[str, Any]:
        """Read-only view of the event data."""
        return self._payload

    def get(self, key: str, default: Any = None) -> Any:
        """Shortcut for ``event.payload.get(key, default)``."""
        return self._payload.get(key, default)
