# hsmkit/runtime/graph.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Read-only navigation over the state tree.

Every function here follows ``parent`` and ``active_substate`` links only;
nothing is mutated. Chart depth is small and fixed by the application, so
the plain quadratic common-ancestor search is fine.
"""

from typing import Iterator, List, Optional

from hsmkit.interfaces.protocols import HsmState


def root_of(state: HsmState) -> HsmState:
    """Follow parent links up to the state with no parent."""
    s = state
    while s.parent is not None:
        s = s.parent
    return s


def active_leaf(state: HsmState) -> HsmState:
    """
    Return the active state of the machine that ``state`` belongs to.

    Any state of the tree may be passed in; the walk always starts from the
    root and follows active substates as deep as they go. A root with no
    active substate is its own active leaf.
    """
    s = root_of(state)
    while s.active_substate is not None:
        s = s.active_substate
    return s


def ancestors(state: HsmState) -> Iterator[HsmState]:
    """Yield ``state`` and then each of its ancestors up to the root."""
    s: Optional[HsmState] = state
    while s is not None:
        yield s
        s = s.parent


def lowest_common_ancestor(left: HsmState, right: HsmState) -> Optional[HsmState]:
    """
    Return the deepest state that is an ancestor (inclusive) of both states.

    Returns None when the states live in different trees.
    """
    for lhs in ancestors(left):
        for rhs in ancestors(right):
            if lhs is rhs:
                return lhs
    return None


def active_path(state: HsmState) -> List[HsmState]:
    """Return the active configuration from the root down to the active leaf."""
    path = [root_of(state)]
    while path[-1].active_substate is not None:
        path.append(path[-1].active_substate)
    return path


def is_descendant(state: HsmState, ancestor: HsmState) -> bool:
    """True when ``ancestor`` is ``state`` or one of its ancestors."""
    return any(s is ancestor for s in ancestors(state))


def depth(state: HsmState) -> int:
    """Number of parent links between ``state`` and its root."""
    return sum(1 for _ in ancestors(state)) - 1
