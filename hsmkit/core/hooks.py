# hsmkit/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import logging
from typing import Any, List, Optional

from hsmkit.interfaces.protocols import Hook

logger = logging.getLogger(__name__)


class HookManager:
    """
    Manages the registration and execution of hooks that listen to state machine
    lifecycle events (on_enter, on_exit, on_initialize, on_error). Users can
    attach logging, monitoring, or custom side effects without altering core logic.

    A hook only needs to define the methods it cares about. A failing hook is
    logged and does not stop the remaining hooks or the machine.
    """

    def __init__(self, hooks: Optional[List[Hook]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[Hook] = list(hooks or [])

    @property
    def hooks(self) -> List[Hook]:
        return list(self._hooks)

    def register_hook(self, hook: Hook) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the Hook protocol methods.
        """
        self._hooks.append(hook)

    def execute_on_enter(self, state: Any) -> None:
        """
        Run all hooks' on_enter logic after a state has been entered.
        """
        self._invoke("on_enter", state)

    def execute_on_exit(self, state: Any) -> None:
        """
        Run all hooks' on_exit logic after a state has been exited.
        """
        self._invoke("on_exit", state)

    def execute_on_initialize(self, state: Any) -> None:
        """
        Run all hooks' on_initialize logic once a state's initializer has run.
        """
        self._invoke("on_initialize", state)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when an exception escapes the machine.
        """
        self._invoke("on_error", error)

    def _invoke(self, method: str, arg: Any) -> None:
        for hook in self._hooks:
            callback = getattr(hook, method, None)
            if callback is None:
                continue
            try:
                callback(arg)
            except Exception:
                logger.exception("Hook %r failed in %s(%r)", hook, method, arg)
