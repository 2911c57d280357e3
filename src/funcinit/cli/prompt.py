"""Interactive single-choice selection with arrow keys."""

from __future__ import annotations

from collections.abc import Sequence

import readchar
import typer
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table

console = Console()


def get_key() -> str:
    """Get a single keypress in a cross-platform way using readchar."""
    key = readchar.readkey()
    if key == readchar.key.UP:
        return "up"
    if key == readchar.key.DOWN:
        return "down"
    if key in (readchar.key.ENTER, readchar.key.CR, readchar.key.LF):
        return "enter"
    if key == readchar.key.ESC:
        return "escape"
    if key == readchar.key.CTRL_C:
        raise KeyboardInterrupt
    return key


def select_with_arrows(prompt_text: str, options: Sequence[str]) -> str:
    """Let the user pick one of options and return it.

    Escape or Ctrl-C cancels and exits with code 1.
    """
    if not options:
        raise ValueError("select_with_arrows requires at least one option")
    choices = list(options)
    selected_index = 0

    def create_selection_panel() -> Panel:
        table = Table.grid(padding=(0, 2))
        table.add_column(style="cyan", justify="left", width=3)
        table.add_column(style="white", justify="left")
        for i, choice in enumerate(choices):
            marker = "▶" if i == selected_index else " "
            table.add_row(marker, f"[cyan]{choice}[/cyan]")
        table.add_row("", "")
        table.add_row("", "[dim]Use ↑/↓ to navigate, Enter to select, Esc to cancel[/dim]")
        return Panel(
            table,
            title=f"[bold]{prompt_text}[/bold]",
            border_style="cyan",
            padding=(1, 2),
        )

    console.print()
    with Live(create_selection_panel(), console=console, transient=True, auto_refresh=False) as live:
        while True:
            try:
                key = get_key()
            except KeyboardInterrupt:
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(code=1)
            if key == "up":
                selected_index = (selected_index - 1) % len(choices)
            elif key == "down":
                selected_index = (selected_index + 1) % len(choices)
            elif key == "enter":
                break
            elif key == "escape":
                console.print("\n[yellow]Selection cancelled[/yellow]")
                raise typer.Exit(code=1)
            live.update(create_selection_panel(), refresh=True)

    console.print(f"{prompt_text}: ", end="")
    return choices[selected_index]
