"""Tests for debug mode functionality."""

import pytest

from graphsuite.diagnostics import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)
from graphsuite.errors import InconsistentStateError
from graphsuite.graphs import AdjacencyListGraph, kruskal, weight_table
from graphsuite.graphs.utils import consistency_failure


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


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)

        with debug_context(True):
            assert is_debug_enabled()

            with debug_context(False):
                assert not is_debug_enabled()

            assert is_debug_enabled()

        assert not is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """Test that the previous mode is restored when the body raises."""
    original = is_debug_enabled()

    with pytest.raises(InconsistentStateError):
        with debug_context(True):
            consistency_failure("forced")

    assert is_debug_enabled() == original


def test_consistency_failure_modes() -> None:
    """Test that guards raise only in debug mode."""
    with debug_context(False):
        consistency_failure("tolerated")

    with debug_context(True):
        with pytest.raises(InconsistentStateError, match="strict"):
            consistency_failure("strict")


def test_kruskal_cross_check_in_debug_mode() -> None:
    """Test that Kruskal's debug cross-check passes on a valid graph."""
    G = AdjacencyListGraph()
    W = weight_table(
        G, [("A", "B", 1.0), ("B", "C", 1.0), ("C", "A", 1.0), ("C", "D", 2.0)]
    )

    with debug_context(True):
        result = kruskal(G, W)

    assert result.total_weight == 4.0
    assert result.component_count == 1
