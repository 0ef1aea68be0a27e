# hsmkit/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, List, Set

from hsmkit.core.errors import ValidationError
from hsmkit.core.states import kind_of
from hsmkit.interfaces.protocols import HsmState


class Validator:
    """
    Checks that a state tree is well-formed before a machine runs it.

    The walk follows ``children`` from the root. States that do not expose
    children are treated as leaves, so only their own links are checked.
    """

    def validate_tree(self, root: HsmState) -> List[str]:
        """
        Return a list of problems found in the tree under ``root``.

        :param root: The machine's root state.
        :return: Human readable error messages; empty if the tree is valid.
        """
        errors: List[str] = []
        if root.parent is not None:
            errors.append(f"Root state '{kind_of(root)}' has parent '{kind_of(root.parent)}'")

        seen: Set[int] = set()
        pending = [root]
        while pending:
            state = pending.pop()
            if id(state) in seen:
                errors.append(f"State '{kind_of(state)}' appears more than once in the tree")
                continue
            seen.add(id(state))

            children = _children_of(state)
            for child in children:
                if child.parent is not state:
                    errors.append(
                        f"State '{kind_of(child)}' is listed under '{kind_of(state)}' "
                        f"but its parent is '{kind_of(child.parent) if child.parent is not None else None}'"
                    )
            pending.extend(children)

            active = state.active_substate
            if active is not None and active.parent is not state:
                errors.append(f"Active substate '{kind_of(active)}' of '{kind_of(state)}' is not one of its children")

        return errors

    def check(self, root: HsmState) -> None:
        """
        Validate the tree under ``root``.

        :raises ValidationError: If any problem is found.
        """
        errors = self.validate_tree(root)
        if errors:
            raise ValidationError("Invalid state tree:\n" + "\n".join(errors), errors)


def _children_of(state: Any) -> List[Any]:
    return list(getattr(state, "children", ()) or ())
