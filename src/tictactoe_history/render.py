"""Terminal rendering of a ViewModel with rich.

Pure presentation: reads the view model, never the game state.
"""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tictactoe_history.config import DisplayConfig
from tictactoe_history.game.view import ViewModel

_MARK_STYLES = {"X": "bold cyan", "O": "bold magenta", "": "dim"}
_HIGHLIGHT_STYLE = "bold black on yellow"


def board_text(view: ViewModel, display: DisplayConfig | None = None) -> Text:
    """Render the 3x3 board with box-drawing characters.

    Cells on the winning line are highlighted.
    """
    display = display or DisplayConfig()
    highlight = set(view.winning_line or ())
    margin = "      " if display.show_coordinates else "  "

    board = Text()
    if display.show_coordinates:
        board.append("         1     2     3\n", style="dim")
    board.append(f"{margin}┌─────┬─────┬─────┐\n", style="dim")

    for r in range(3):
        if display.show_coordinates:
            board.append(f"  {r + 1}   ", style="dim")
        else:
            board.append(margin)
        for c in range(3):
            board.append("│", style="dim")
            index = r * 3 + c
            cell = view.board[index]
            if index in highlight:
                style = _HIGHLIGHT_STYLE
            else:
                style = _MARK_STYLES.get(cell, "bold white")
            board.append(f"  {cell or '·'}  ", style=style)
        board.append("│\n", style="dim")
        if r < 2:
            board.append(f"{margin}├─────┼─────┼─────┤\n", style="dim")

    board.append(f"{margin}└─────┴─────┴─────┘", style="dim")
    return board


def move_list_text(view: ViewModel) -> Text:
    """Move list in display order, the current step in bold."""
    text = Text()
    for entry in view.move_list:
        marker = "▶ " if entry.is_current else "  "
        style = "bold" if entry.is_current else ""
        text.append(f"{marker}{entry.step:>2d}. {entry.label}\n", style=style)
    text.append(f"\n[sort] show {view.sort_button_text}", style="dim")
    return text


def status_line(view: ViewModel) -> Text:
    if view.winning_line is not None:
        style = "bold green"
    elif view.is_draw:
        style = "bold yellow"
    else:
        style = "bold"
    return Text(view.status_text, style=style)


def render(view: ViewModel, display: DisplayConfig | None = None) -> Panel:
    """Board on the left; status and move list on the right."""
    side = Group(status_line(view), Text(""), move_list_text(view))

    layout = Table(show_header=False, show_edge=False, padding=0, expand=True)
    layout.add_column("board", ratio=1)
    layout.add_column("side", ratio=1, min_width=32)
    layout.add_row(board_text(view, display), side)

    return Panel(
        layout,
        title=f"[bold]Tic-Tac-Toe[/bold]  step {view.current_step}",
        border_style="green",
        padding=(0, 1),
    )
