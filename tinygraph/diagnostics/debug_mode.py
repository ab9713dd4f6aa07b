"""Debug mode management for tinygraph.

While debug mode is on, every graph mutation re-validates the representation
through :func:`debug_check` and ``kruskal_mst`` verifies that its result is a
spanning forest.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator, Optional

from .core import assert_graph_consistent

if TYPE_CHECKING:
    from ..graphs.core import Graph

DEBUG_ENV_VAR = "TINYGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in _TRUTHY


_debug_enabled: bool = _env_flag(os.getenv(DEBUG_ENV_VAR))


def is_debug_enabled() -> bool:
    """
    Return whether tinygraph debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    TINYGRAPH_DEBUG environment variable.

    Returns
    -------
    bool
        True if debug mode is enabled, False otherwise.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable tinygraph debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def refresh_from_environment() -> bool:
    """
    Re-read TINYGRAPH_DEBUG and apply it.

    The variable is read once at import; call this after changing it in a
    running process. Values "1", "true", "yes" and "on" (any case, surrounding
    whitespace ignored) enable debug mode; anything else, or an unset
    variable, disables it.

    Returns
    -------
    bool
        The debug state now in effect.
    """
    set_debug_enabled(_env_flag(os.getenv(DEBUG_ENV_VAR)))
    return _debug_enabled


def debug_check(graph: "Graph") -> None:
    """
    Re-validate a graph after a mutation when debug mode is on.

    Representations call this at the end of add_vertex, add_edge,
    remove_vertex and remove_edge. With debug mode off it does nothing.

    Parameters
    ----------
    graph:
        Graph that was just mutated.

    Raises
    ------
    ValueError
        If debug mode is on and the graph fails check_graph_consistency.
    """
    if _debug_enabled:
        assert_graph_consistent(graph)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode within the context.

    Example
    -------
    >>> with debug_context(False):
    ...     for v in range(10_000):
    ...         graph.add_vertex(v)  # bulk load without per-edit checks
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
