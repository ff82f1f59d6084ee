"""Core domain layer — pure Breakthrough rules with zero external dependencies.

Quick start::

    from breakthrough.core import Board, STANDARD_RULES, parse_move

    board = Board.initial()
    move = parse_move("a2 a3")
"""

from breakthrough.core.board import Board
from breakthrough.core.enums import PieceKind, Side
from breakthrough.core.errors import (
    BlockedBySelfError,
    BlockedStraightMoveError,
    BreakthroughError,
    DataFormatError,
    EmptySourceError,
    GameOverError,
    IllegalMoveError,
    InputFormatError,
    OutOfBoundsError,
    TooWideStepError,
    WrongDirectionError,
    WrongOwnerError,
)
from breakthrough.core.move import Move, parse_move
from breakthrough.core.piece import Piece
from breakthrough.core.rules import STANDARD_RULES, Rules, RulesPolicy
from breakthrough.core.snapshot import GameSnapshot
from breakthrough.core.types import (
    BOARD_SIZE,
    Coordinate,
    all_coordinates,
    coordinate_name,
    parse_coordinate,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "BOARD_SIZE",
    "Coordinate",
    "all_coordinates",
    "coordinate_name",
    "parse_coordinate",
    "parse_move",
    # Domain objects
    "Board",
    "GameSnapshot",
    "Move",
    "Piece",
    "Rules",
    "RulesPolicy",
    "STANDARD_RULES",
    # Errors
    "BlockedBySelfError",
    "BlockedStraightMoveError",
    "BreakthroughError",
    "DataFormatError",
    "EmptySourceError",
    "GameOverError",
    "IllegalMoveError",
    "InputFormatError",
    "OutOfBoundsError",
    "TooWideStepError",
    "WrongDirectionError",
    "WrongOwnerError",
]
