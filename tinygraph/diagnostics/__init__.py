"""Diagnostics and debugging utilities for tinygraph."""

from .core import (
    assert_graph_consistent,
    assert_spanning_forest,
    check_graph_consistency,
    is_spanning_forest,
)
from .debug_mode import (
    DEBUG_ENV_VAR,
    debug_check,
    debug_context,
    is_debug_enabled,
    refresh_from_environment,
    set_debug_enabled,
)

__all__ = [
    "check_graph_consistency",
    "assert_graph_consistent",
    "is_spanning_forest",
    "assert_spanning_forest",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "debug_check",
    "refresh_from_environment",
    "DEBUG_ENV_VAR",
]
