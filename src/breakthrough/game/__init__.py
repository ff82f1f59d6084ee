"""Game management layer — players, state machine, controller.

Quick start::

    from breakthrough.game import GameController

    ctrl = GameController()
    ctrl.new_game("Alice", "Bob")
"""

from breakthrough.game.controller import GameController, GameEvents
from breakthrough.game.interfaces import GameEndReason, GamePhase, MoveResult
from breakthrough.game.player import Player
from breakthrough.game.state import Game

__all__ = [
    "Game",
    "GameController",
    "GameEndReason",
    "GameEvents",
    "GamePhase",
    "MoveResult",
    "Player",
]
