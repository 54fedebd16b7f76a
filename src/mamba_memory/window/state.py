"""Snapshot of a memory window."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console, ConsoleOptions, RenderResult


@dataclass
class WindowState:
    """Current state of a windowed memory.

    Attributes:
        identity: Conversation identity.
        capacity: Token budget.
        message_count: Number of retained messages.
        token_count: Estimated cost of the retained messages.
        has_system_message: Whether a system message leads the window.
    """

    identity: Hashable
    capacity: int
    message_count: int = 0
    token_count: int = 0
    has_system_message: bool = False

    @property
    def over_capacity(self) -> bool:
        """True only when a lone message alone exceeds the budget."""
        return self.token_count > self.capacity

    @property
    def utilization(self) -> float:
        if self.capacity <= 0:
            return 0.0
        return self.token_count / self.capacity

    def __str__(self) -> str:
        lines = [
            f"Window {self.identity!r}",
            f"  Messages: {self.message_count}",
            f"  Tokens:   {self.token_count}/{self.capacity} ({self.utilization:.0%})",
            f"  System:   {'yes' if self.has_system_message else 'no'}",
        ]
        return "\n".join(lines)

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        """Render as a Rich table when passed to ``rich.print()`` or ``Console.print()``."""
        table = Table(title=f"Window {self.identity!r}", show_header=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        table.add_row("Messages", str(self.message_count))
        style = "red" if self.over_capacity else "green"
        table.add_row("Tokens", f"[{style}]{self.token_count}[/{style}] / {self.capacity}")
        table.add_row("Utilization", f"{self.utilization:.0%}")
        table.add_row("System message", "yes" if self.has_system_message else "no")
        yield table
