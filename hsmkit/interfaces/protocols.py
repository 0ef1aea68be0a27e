# hsmkit/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class HsmState(Protocol):
    """
    State protocol for type checking.

    Attributes:
        parent: The containing state, or None for the root of the machine.
        active_substate: The child currently considered active, or None.

    Runtime Invariants:
    - ``parent`` never changes after construction.
    - ``active_substate`` is only ever one of the state's own children, and
      is written only by the transition engine.

    States may also expose a ``kind`` attribute used for handler lookup.
    Without one, the class name is used.
    """

    parent: Optional["HsmState"]
    active_substate: Optional["HsmState"]


@runtime_checkable
class HsmEvent(Protocol):
    """
    Event protocol for type checking.

    Runtime Invariants:
    - Events are immutable after creation.
    - The engine reads ``kind`` only and never inspects the payload.
    """

    @property
    def kind(self) -> str:
        """The discriminator used for handler lookup."""
        ...

    @property
    def payload(self) -> Any:
        """Arbitrary application data carried by the event."""
        ...


@runtime_checkable
class Hook(Protocol):
    """
    Observer protocol for lifecycle notifications.

    Any of the methods may be left out; the hook manager skips the ones a
    hook does not define.
    """

    def on_enter(self, state: HsmState) -> None: ...

    def on_exit(self, state: HsmState) -> None: ...

    def on_initialize(self, state: HsmState) -> None: ...

    def on_error(self, error: Exception) -> None: ...
