"""
Core package: states, events, handler lookup and the dispatch/transition engine.
"""

from .errors import (
    HSMError,
    InitializationDepthError,
    InvalidTransitionTargetError,
    TransitionError,
    UnhandledEventError,
    ValidationError,
)
from .base import StateInfo
from .states import State, kind_of
from .events import Event
from .hooks import HookManager
from .handlers import DEFAULT_MAX_INITIALIZE_DEPTH, HandlerTable, default_handlers
from .dispatcher import dispatch
from .transitions import transition_to
from .history import (
    deep_history_target,
    shallow_history_target,
    transition_to_deep_history,
    transition_to_shallow_history,
)
from .validations import Validator
from .state_machine import StateMachine

__all__ = [
    "HSMError",
    "InitializationDepthError",
    "InvalidTransitionTargetError",
    "TransitionError",
    "UnhandledEventError",
    "ValidationError",
    "StateInfo",
    "State",
    "kind_of",
    "Event",
    "HookManager",
    "DEFAULT_MAX_INITIALIZE_DEPTH",
    "HandlerTable",
    "default_handlers",
    "dispatch",
    "transition_to",
    "deep_history_target",
    "shallow_history_target",
    "transition_to_deep_history",
    "transition_to_shallow_history",
    "Validator",
    "StateMachine",
]
