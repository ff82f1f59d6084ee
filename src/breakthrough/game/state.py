"""Game state machine — validation, application, and win detection.

This is a pure data/logic class — no I/O, no threading, no UI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from breakthrough.core.board import Board
from breakthrough.core.enums import Side
from breakthrough.core.errors import (
    BlockedBySelfError,
    BlockedStraightMoveError,
    EmptySourceError,
    GameOverError,
    IllegalMoveError,
    OutOfBoundsError,
    TooWideStepError,
    WrongDirectionError,
    WrongOwnerError,
)
from breakthrough.core.move import Move
from breakthrough.core.piece import Piece
from breakthrough.core.rules import STANDARD_RULES, RulesPolicy
from breakthrough.core.snapshot import EMPTY_CHAR, GameSnapshot
from breakthrough.core.types import BOARD_SIZE, Coordinate
from breakthrough.game.interfaces import GameEndReason, GamePhase, MoveResult
from breakthrough.game.player import Player

_LOGGER = logging.getLogger(__name__)


class Game:
    """One match: board, both players, side to move, ply counter, rules.

    Args:
        white: White's player (or ``None`` for a default-named one).
        black: Black's player.
        rules: Movement policy; shared, not owned.
        turn: Side to move.
        ply_count: Moves applied so far.
        setup: Place the starting position. ``False`` leaves the board empty.
    """

    __slots__ = (
        "board",
        "white",
        "black",
        "rules",
        "_turn",
        "_ply_count",
        "_winner",
        "_end_reason",
    )

    def __init__(
        self,
        white: Player | None = None,
        black: Player | None = None,
        rules: RulesPolicy = STANDARD_RULES,
        *,
        turn: Side = Side.WHITE,
        ply_count: int = 0,
        setup: bool = True,
    ) -> None:
        if not isinstance(turn, Side):
            raise ValueError(f"turn must be a Side, got {turn!r}")
        if not isinstance(ply_count, int) or isinstance(ply_count, bool) or ply_count < 0:
            raise ValueError(f"ply_count must be a non-negative int, got {ply_count!r}")
        self.board = Board()
        self.white = white if white is not None else Player("", Side.WHITE)
        self.black = black if black is not None else Player("", Side.BLACK)
        if self.white.side != Side.WHITE or self.black.side != Side.BLACK:
            raise ValueError("Players must be passed as (white, black)")
        self.rules = rules
        self._turn = turn
        self._ply_count = ply_count
        self._winner: Side | None = None
        self._end_reason = GameEndReason.NONE

        if setup:
            self.board.reset_initial_setup()

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def turn(self) -> Side:
        return self._turn

    @property
    def ply_count(self) -> int:
        """Number of moves applied since the game began."""
        return self._ply_count

    @property
    def winner(self) -> Side | None:
        return self._winner

    @property
    def end_reason(self) -> GameEndReason:
        return self._end_reason

    @property
    def phase(self) -> GamePhase:
        return GamePhase.ONGOING if self._winner is None else GamePhase.FINISHED

    @property
    def is_game_over(self) -> bool:
        return self._winner is not None

    def player(self, side: Side) -> Player:
        return self.white if side == Side.WHITE else self.black

    @property
    def current_player(self) -> Player:
        return self.player(self._turn)

    # ── Move application ─────────────────────────────────────────────────

    def validate_move(self, move: Move) -> IllegalMoveError | None:
        """Return the first rule *move* breaks for the side to move, or ``None``.

        Checks run in a fixed order and stop at the first failure.
        """
        src, dst = move.from_pos, move.to_pos

        # 1. Both endpoints on the board
        if not src.is_inside() or not dst.is_inside():
            return OutOfBoundsError()

        # 2. Something to move
        piece = self.board.get(src)
        if piece is None:
            return EmptySourceError()

        # 3. Owned by the side to move
        if piece.side != self._turn:
            return WrongOwnerError()

        # 4. Exactly one row forward
        if move.d_row != self.rules.forward_direction(self._turn):
            return WrongDirectionError()

        # 5. Straight or one column sideways
        if abs(move.d_col) > 1:
            return TooWideStepError()

        # 6. Never onto an own piece
        target = self.board.get(dst)
        if target is not None and target.side == self._turn:
            return BlockedBySelfError()

        # 7. Straight moves never capture
        if move.d_col == 0 and target is not None:
            return BlockedStraightMoveError()

        return None

    def try_apply_move(self, move: Move) -> MoveResult:
        """Validate and apply *move*.

        Rejections are returned, never raised, and leave the game unchanged.
        """
        if self.is_game_over:
            return MoveResult.rejected(GameOverError())

        error = self.validate_move(move)
        if error is not None:
            return MoveResult.rejected(error)

        mover = self._turn
        captured = self._relocate(move.from_pos, move.to_pos)
        self._ply_count += 1

        reason = self._check_winner_after_move(move.to_pos, mover)
        if reason is None:
            self._turn = mover.opposite
        else:
            self._winner = mover
            self._end_reason = reason
            _LOGGER.debug(
                "%s wins after %d plies (%s)", mover.display_name, self._ply_count, reason.name
            )

        _LOGGER.debug("Applied %s (ply %d)", move, self._ply_count)
        return MoveResult(applied=True, winner=self._winner, captured=captured)

    def apply_move(self, move: Move) -> MoveResult:
        """Like :meth:`try_apply_move`, but raise the rejection error."""
        result = self.try_apply_move(move)
        if result.error is not None:
            raise result.error
        return result

    # ── Legal move listing ───────────────────────────────────────────────

    def has_any_legal_move(self, side: Side) -> bool:
        return next(self._iter_legal_moves(side), None) is not None

    def legal_moves_for(self, side: Side) -> list[Move]:
        """Every legal move of *side*, grouped by piece in row-major order."""
        return list(self._iter_legal_moves(side))

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move (empty once the game is over)."""
        if self.is_game_over:
            return []
        return self.legal_moves_for(self._turn)

    def legal_moves_from(self, pos: Coordinate) -> list[Move]:
        """Legal moves of the side to move that start on *pos*."""
        return [m for m in self.legal_moves() if m.from_pos == pos]

    def _iter_legal_moves(self, side: Side) -> Iterator[Move]:
        direction = self.rules.forward_direction(side)
        for pos, piece in self.board.enumerate_pieces():
            if piece.side != side:
                continue

            forward = pos.offset(direction, 0)
            if forward.is_inside() and self.board.is_empty(forward):
                yield Move(pos, forward)

            for d_col in (-1, 1):
                diagonal = pos.offset(direction, d_col)
                if not diagonal.is_inside():
                    continue
                target = self.board.get(diagonal)
                if target is None or target.side != side:
                    yield Move(pos, diagonal)

    # ── Serialisation ────────────────────────────────────────────────────

    def to_snapshot(self) -> GameSnapshot:
        rows = [
            "".join(
                str(self.board.get(Coordinate(r, c)) or EMPTY_CHAR)
                for c in range(BOARD_SIZE)
            )
            for r in range(BOARD_SIZE)
        ]
        return GameSnapshot(
            white_name=self.white.name,
            black_name=self.black.name,
            turn=self._turn,
            ply_count=self._ply_count,
            rows=rows,
        )

    @classmethod
    def from_snapshot(
        cls,
        data: GameSnapshot | Mapping[str, Any],
        rules: RulesPolicy = STANDARD_RULES,
    ) -> Game:
        """Rebuild a game. Raises :class:`DataFormatError` on a bad board."""
        if isinstance(data, GameSnapshot):
            snapshot = data
            snapshot.validate()
        else:
            snapshot = GameSnapshot.from_dict(dict(data))

        game = cls(
            Player(snapshot.white_name, Side.WHITE),
            Player(snapshot.black_name, Side.BLACK),
            rules,
            turn=snapshot.turn,
            ply_count=snapshot.ply_count,
            setup=False,
        )
        for r, row in enumerate(snapshot.rows):
            for c, ch in enumerate(row):
                if ch != EMPTY_CHAR:
                    game.board.set(Coordinate(r, c), Piece.from_char(ch))
        return game

    # ── Internal ─────────────────────────────────────────────────────────

    def _relocate(self, src: Coordinate, dst: Coordinate) -> Piece | None:
        """Move the piece on *src* to *dst*; return whatever it replaced."""
        moving = self.board.get(src)
        captured = self.board.get(dst)
        self.board.set(src, None)
        self.board.set(dst, moving)
        return captured

    def _check_winner_after_move(
        self, last_to: Coordinate, mover: Side
    ) -> GameEndReason | None:
        opponent = mover.opposite

        # a. Reached the far edge
        if self.rules.is_winning_row(mover, last_to.row):
            return GameEndReason.REACHED_FAR_EDGE

        # b. Opponent eliminated
        if self.board.count(opponent) == 0:
            return GameEndReason.ELIMINATED

        # c. Opponent blockaded (no legal move counts as a loss)
        if not self.has_any_legal_move(opponent):
            return GameEndReason.BLOCKADE

        return None

    def __repr__(self) -> str:
        return (
            f"Game(turn={self._turn.display_name}, ply={self._ply_count}, "
            f"phase={self.phase.name})"
        )
