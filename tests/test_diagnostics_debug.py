"""Tests for debug mode functionality."""

import importlib

import pytest

from tinygraph import EdgeListGraph, kruskal_mst
from tinygraph.diagnostics import (
    DEBUG_ENV_VAR,
    debug_check,
    debug_context,
    is_debug_enabled,
    refresh_from_environment,
    set_debug_enabled,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        # Back to previous (False in this block)
        assert not is_debug_enabled()

        set_debug_enabled(True)
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        # Back to True
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """Test that the previous setting survives an exception inside the context."""
    original = is_debug_enabled()

    with pytest.raises(RuntimeError):
        with debug_context(not original):
            raise RuntimeError("boom")

    assert is_debug_enabled() == original


@pytest.mark.parametrize(
    "value, expected",
    [("1", True), ("true", True), ("ON", True), ("yes", True), ("0", False), ("", False)],
)
def test_debug_env_var(monkeypatch, value, expected) -> None:
    """Test that TINYGRAPH_DEBUG seeds the initial debug state."""
    from tinygraph.diagnostics import debug_mode

    monkeypatch.setenv("TINYGRAPH_DEBUG", value)
    try:
        importlib.reload(debug_mode)
        assert debug_mode.is_debug_enabled() is expected
    finally:
        monkeypatch.delenv("TINYGRAPH_DEBUG", raising=False)
        importlib.reload(debug_mode)


@pytest.mark.parametrize(
    "value, expected",
    [(" yes ", True), ("On", True), ("off", False), ("2", False), (None, False)],
)
def test_refresh_from_environment(monkeypatch, value, expected) -> None:
    """Test re-reading TINYGRAPH_DEBUG in a running process."""
    if value is None:
        monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    else:
        monkeypatch.setenv(DEBUG_ENV_VAR, value)

    with debug_context(not expected):
        assert refresh_from_environment() is expected
        assert is_debug_enabled() is expected


class ForgetfulGraph(EdgeListGraph):
    """Edge-list graph whose degree ignores every edge."""

    def degree(self, v):
        return 0


def test_debug_check_only_runs_in_debug_mode() -> None:
    """Test that debug_check validates the graph only while debug mode is on."""
    with debug_context(False):
        G = ForgetfulGraph()
        G.add_vertex("A")
        G.add_vertex("B")
        G.add_edge("A", "B", 1)
        debug_check(G)

    with debug_context(True):
        with pytest.raises(ValueError, match="ForgetfulGraph is inconsistent"):
            debug_check(G)
        with pytest.raises(ValueError, match="inconsistent"):
            G.add_vertex("C")


def test_mutations_work_with_debug_mode_off() -> None:
    """Test that graph operations behave the same without consistency checks."""
    with debug_context(False):
        G = EdgeListGraph()
        for v in "ABC":
            G.add_vertex(v)
        G.add_edge("A", "B", 1)
        G.add_edge("B", "C", 2)
        G.remove_edge("A", "B")
        assert G.degree("B") == 1
        assert kruskal_mst(G) == G.edges()
