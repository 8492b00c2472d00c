# Game session: owns the live board, the player to move and the game phase.
# Public state shape (used by the API and the agents):
# {
#   "counts": [int]*14,            # flat board, stores at 6 and 13
#   "current_player": 0 | 1,       # 0 = Player 1, 1 = Player 2
#   "mode": "avalanche" | "capture",
#   "over": bool,
#   "winner": 0 | 1 | None
# }

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

from mancala_engine.engine.board import LENGTH, GameMode, Player, initial_counts
from mancala_engine.engine.core import (
    CaptureRecord,
    Outcome,
    check_game_over,
    is_legal,
    legal_pits,
    resolve_turn,
    scores,
)
from mancala_engine.engine.sowing import Trace

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    PLAYING = "playing"
    OVER = "over"


@dataclass(frozen=True)
class TurnReport:
    """Everything the presentation layer needs to replay one activation."""
    origin: int
    player: Player
    outcome: Outcome
    traces: Tuple[Trace, ...] = field(default_factory=tuple)
    captures: Tuple[CaptureRecord, ...] = field(default_factory=tuple)
    sweep: Optional[CaptureRecord] = None
    over: bool = False
    winner: Optional[Player] = None


class Game:
    def __init__(
        self,
        mode: GameMode = GameMode.AVALANCHE,
        *,
        counts: Optional[List[int]] = None,
        current_player: Player = Player.ONE,
        wait_for_animation: bool = False,
    ) -> None:
        self._mode = GameMode(mode)
        self._counts = list(counts) if counts is not None else initial_counts()
        self._total = sum(self._counts)
        self._current = Player(current_player)
        self._phase = GamePhase.PLAYING
        self._winner: Optional[Player] = None
        self._wait_for_animation = wait_for_animation
        self._animating = False

    # -----------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------
    @property
    def mode(self) -> GameMode:
        return self._mode

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(self._counts)

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def is_over(self) -> bool:
        return self._phase is GamePhase.OVER

    @property
    def winner(self) -> Optional[Player]:
        return self._winner

    @property
    def idle(self) -> bool:
        return not self._animating

    def scores(self) -> Tuple[int, int]:
        return scores(self._counts)

    def legal_pits(self) -> List[int]:
        if self.is_over:
            return []
        return legal_pits(self._counts, self._current)

    # -----------------------------------------------------------------
    # Commands
    # -----------------------------------------------------------------
    def activate_pit(self, index: int) -> Optional[TurnReport]:
        """
        Play pit `index` for the current player. Invalid commands (empty pit,
        store, opponent's pit, finished game, animation still running) are
        ignored and return None.
        """
        if self.is_over or not self.idle:
            logger.debug("ignored pit %d: game %s", index, "over" if self.is_over else "busy")
            return None
        if not is_legal(self._counts, index, self._current):
            logger.debug("ignored pit %d for %s", index, self._current.label)
            return None

        counts = list(self._counts)
        result = resolve_turn(counts, index, self._current, self._mode)
        self._counts = counts
        self._current = result.next_player

        game_over = check_game_over(self._counts, self._mode)
        if game_over is not None:
            self._phase = GamePhase.OVER
            self._winner = game_over.winner

        if sum(self._counts) != self._total:
            raise RuntimeError(f"stone count changed during a turn: {self._total} -> {sum(self._counts)}")

        if self._wait_for_animation:
            self._animating = True

        return TurnReport(
            origin=index,
            player=result.player,
            outcome=result.outcome,
            traces=result.traces,
            captures=result.captures,
            sweep=game_over.sweep if game_over is not None else None,
            over=self.is_over,
            winner=self._winner,
        )

    def animation_finished(self) -> None:
        self._animating = False

    # -----------------------------------------------------------------
    # Snapshots
    # -----------------------------------------------------------------
    def to_state(self) -> Dict:
        return {
            "counts": list(self._counts),
            "current_player": int(self._current),
            "mode": self._mode.value,
            "over": self.is_over,
            "winner": int(self._winner) if self._winner is not None else None,
        }

    @classmethod
    def from_state(cls, state: Dict) -> "Game":
        counts = list(state["counts"])
        if len(counts) != LENGTH:
            raise ValueError(f"expected {LENGTH} pit counts, got {len(counts)}")
        if any(c < 0 for c in counts):
            raise ValueError("pit counts must be non-negative")
        game = cls(
            GameMode(state.get("mode", GameMode.AVALANCHE.value)),
            counts=counts,
            current_player=Player(state["current_player"]),
        )
        if state.get("over"):
            game._phase = GamePhase.OVER
            winner = state.get("winner")
            game._winner = Player(winner) if winner is not None else None
        else:
            # a snapshot can arrive with one side already empty
            game_over = check_game_over(game._counts, game._mode)
            if game_over is not None:
                game._phase = GamePhase.OVER
                game._winner = game_over.winner
        return game

    def __repr__(self) -> str:
        return (
            f"Game(mode={self._mode.value}, current={self._current.label}, "
            f"phase={self._phase.value}, counts={self._counts})"
        )


# ---------------------------------------------------------------------
# State-based helpers
# ---------------------------------------------------------------------

def new_game(mode: GameMode = GameMode.AVALANCHE) -> Dict:
    return Game(mode).to_state()

def legal_actions(state: Dict) -> List[int]:
    return Game.from_state(state).legal_pits()

def step(state: Dict, action: int) -> Tuple[Dict, Optional[TurnReport]]:
    """Apply one activation to a snapshot. The report is None when the action was ignored."""
    game = Game.from_state(state)
    report = game.activate_pit(action)
    return game.to_state(), report
