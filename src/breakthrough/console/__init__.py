"""Console frontend — text rendering, command parsing, interactive menu."""

from breakthrough.console.commands import Command, CommandKind, parse_command, read_move
from breakthrough.console.menu import ConsoleMenu
from breakthrough.console.renderer import render_board, render_help, render_scores

__all__ = [
    "Command",
    "CommandKind",
    "ConsoleMenu",
    "parse_command",
    "read_move",
    "render_board",
    "render_help",
    "render_scores",
]
