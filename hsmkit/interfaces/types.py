# hsmkit/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Hashable

# A kind is any hashable key. States, events and classes stand for their kind.
KindSpec = Hashable

# Callback Types
EventHandler = Callable[[Any, Any], bool]
StateCallback = Callable[[Any], None]
