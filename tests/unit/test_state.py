"""Tests for WindowState."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from mamba_memory.window import WindowState


class TestWindowState:
    """Tests for WindowState."""

    def test_utilization(self) -> None:
        state = WindowState(identity="c", capacity=200, message_count=3, token_count=50)

        assert state.utilization == 0.25
        assert state.over_capacity is False

    def test_over_capacity(self) -> None:
        state = WindowState(identity="c", capacity=50, message_count=1, token_count=60)
        assert state.over_capacity is True

    def test_str(self) -> None:
        state = WindowState(
            identity="conv-1",
            capacity=100,
            message_count=2,
            token_count=40,
            has_system_message=True,
        )

        text = str(state)

        assert "'conv-1'" in text
        assert "40/100 (40%)" in text
        assert "System:   yes" in text

    def test_rich_rendering(self) -> None:
        """Printing with rich renders a table of metrics."""
        buffer = StringIO()
        console = Console(file=buffer, width=80, color_system=None)
        state = WindowState(identity="conv-1", capacity=100, message_count=2, token_count=40)

        console.print(state)

        output = buffer.getvalue()
        assert "Messages" in output
        assert "40 / 100" in output
        assert "System message" in output

    def test_zero_capacity_renders(self) -> None:
        """A zero capacity reports no utilization instead of failing."""
        state = WindowState(identity="c", capacity=0, message_count=1, token_count=5)
        buffer = StringIO()
        console = Console(file=buffer, width=80, color_system=None)

        console.print(state)

        assert state.utilization == 0.0
        assert "5/0 (0%)" in str(state)
        assert "0%" in buffer.getvalue()
