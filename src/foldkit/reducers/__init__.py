"""
Named reducers.

This module provides the reducer registry and the built-in reducers
that can be selected by name.
"""

from foldkit.reducers.registry import (
    ReducerRegistry,
    ReducerSpec,
    get_reducer,
    get_registry,
)

__all__ = [
    "ReducerSpec",
    "ReducerRegistry",
    "get_registry",
    "get_reducer",
]
