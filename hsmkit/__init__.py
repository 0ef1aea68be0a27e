"""hsmkit: an embeddable hierarchical (UML statechart) state machine engine.

States form a tree. Events are delivered to the active leaf and bubble up
through its ancestors until a handler reports them handled. Transitions run
exit actions from the active leaf up to the common ancestor, rewrite the
active path, run entry actions down to the destination and then let the
destination initialize itself. Shallow and deep history fall out of the
active-substate links left behind on exit.

The engine is synchronous and single threaded. Callers feeding it from
several threads or an event loop must serialize access themselves.
"""

from hsmkit.core import (
    DEFAULT_MAX_INITIALIZE_DEPTH,
    Event,
    HandlerTable,
    HookManager,
    HSMError,
    InitializationDepthError,
    InvalidTransitionTargetError,
    State,
    StateInfo,
    StateMachine,
    TransitionError,
    UnhandledEventError,
    ValidationError,
    Validator,
    default_handlers,
    dispatch,
    transition_to,
    transition_to_deep_history,
    transition_to_shallow_history,
)
from hsmkit.runtime.graph import active_leaf, lowest_common_ancestor, root_of

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_MAX_INITIALIZE_DEPTH",
    "Event",
    "HandlerTable",
    "HookManager",
    "HSMError",
    "InitializationDepthError",
    "InvalidTransitionTargetError",
    "State",
    "StateInfo",
    "StateMachine",
    "TransitionError",
    "UnhandledEventError",
    "ValidationError",
    "Validator",
    "default_handlers",
    "dispatch",
    "transition_to",
    "transition_to_deep_history",
    "transition_to_shallow_history",
    "active_leaf",
    "lowest_common_ancestor",
    "root_of",
]
