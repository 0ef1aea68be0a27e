# hsmkit/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Hashable, List, Optional


class HSMError(Exception):
    """
    Base exception class for errors within the hierarchical state machine library.
    """


class UnhandledEventError(HSMError):
    """
    Raised when dispatch walks from the active state to the root without any
    handler reporting the event as handled.

    This almost always means the root state has no catch-all handler for the
    event kind.
    """

    def __init__(self, event_kind: Hashable, root_kind: Hashable) -> None:
        self.event_kind = event_kind
        self.root_kind = root_kind
        super().__init__(
            f"Unhandled event '{event_kind}'. Does the root state '{root_kind}' "
            f"have an event handler for this event?"
        )


class TransitionError(HSMError):
    """
    Raised when an attempted state transition is invalid or cannot be completed.
    """


class InvalidTransitionTargetError(TransitionError):
    """
    Raised when the destination of a transition shares no ancestor with the
    machine's active state, i.e. it belongs to a different tree. The machine
    is left untouched.
    """

    def __init__(self, target_kind: Hashable, machine_kind: Hashable) -> None:
        self.target_kind = target_kind
        self.machine_kind = machine_kind
        super().__init__(f"Destination state '{target_kind}' does not exist in state machine '{machine_kind}'")


class InitializationDepthError(TransitionError):
    """
    Raised when initializers keep transitioning without settling on a state.
    """

    def __init__(self, state_kind: Hashable, depth: int) -> None:
        self.state_kind = state_kind
        self.depth = depth
        super().__init__(f"Initialization of state '{state_kind}' exceeded the maximum nesting depth of {depth}")


class ValidationError(HSMError):
    """
    Raised when validation detects configuration or runtime constraints violations.
    """

    def __init__(self, message: str, errors: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.errors = list(errors or [])
