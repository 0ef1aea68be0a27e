# hsmkit/core/base.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class StateInfo:
    """
    Tree links needed by the engine for every state.

    ``parent`` is fixed when the record is created; ``active_substate`` always
    starts out empty and is only written by the transition engine.
    """

    parent: Optional[Any] = None
    active_substate: Optional[Any] = field(default=None, init=False)
