# Mancala turn resolution, capture and end-of-game scoring
# All functions work on a flat list of 14 stone counts (see board.py for the
# layout) and mutate it in place where documented.

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from mancala_engine.engine.board import (
    GameMode,
    Player,
    is_store,
    opposite,
    owner,
    pit_range,
    store_of,
)
from mancala_engine.engine.sowing import Trace, sow

logger = logging.getLogger(__name__)


class Outcome(Enum):
    REPEAT = "repeat"      # sow again from the landing pit, same player
    CONTINUE = "continue"  # turn over, same player moves next
    END = "end"            # turn over, other player moves next


@dataclass(frozen=True)
class CaptureRecord:
    """Pits emptied by a capture (or an end-game sweep) and the store that received them."""
    pits: Tuple[int, ...]
    store: int
    stones: int


@dataclass(frozen=True)
class TurnResult:
    player: Player
    outcome: Outcome
    next_player: Player
    traces: Tuple[Trace, ...] = field(default_factory=tuple)
    captures: Tuple[CaptureRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GameOverResult:
    winner: Optional[Player]
    scores: Tuple[int, int]
    sweep: Optional[CaptureRecord] = None


# ---------------------------------------------------------------------
# Read-only helpers
# ---------------------------------------------------------------------

def legal_pits(counts: Sequence[int], player: Player) -> List[int]:
    return [i for i in pit_range(player) if counts[i] > 0]

def is_legal(counts: Sequence[int], index: int, player: Player) -> bool:
    if not 0 <= index < len(counts) or is_store(index):
        return False
    return owner(index) is player and counts[index] > 0

def side_empty(counts: Sequence[int], player: Player) -> bool:
    return all(counts[i] == 0 for i in pit_range(player))

def scores(counts: Sequence[int]) -> Tuple[int, int]:
    return counts[store_of(Player.ONE)], counts[store_of(Player.TWO)]

# ---------------------------------------------------------------------
# End-of-sow decision
# ---------------------------------------------------------------------

def decide(
    counts: List[int], landing: int, player: Player, mode: GameMode
) -> Tuple[Outcome, Optional[CaptureRecord]]:
    """
    Decide what happens after a sow ending on `landing`. Rules are checked
    in order and exactly one applies:
      1. own store                                     -> CONTINUE
      2. Capture: own pit now holding 1, opposite > 0  -> capture, CONTINUE
      3. Avalanche: landing pit holds more than 1      -> REPEAT
      4. anything else                                 -> END
    A capture mutates `counts`.
    """
    store = store_of(player)
    if landing == store:
        return Outcome.CONTINUE, None

    if mode is GameMode.CAPTURE and counts[landing] == 1 and owner(landing) is player:
        across = opposite(landing)
        if counts[across] > 0:
            stones = counts[across] + 1
            counts[store] += stones
            counts[across] = 0
            counts[landing] = 0
            record = CaptureRecord(pits=(landing, across), store=store, stones=stones)
            logger.info("%s captured %d stones from pits %d/%d", player.label, stones, landing, across)
            return Outcome.CONTINUE, record

    if mode is GameMode.AVALANCHE and counts[landing] > 1:
        return Outcome.REPEAT, None

    return Outcome.END, None

# ---------------------------------------------------------------------
# Turn resolution
# ---------------------------------------------------------------------

def resolve_turn(counts: List[int], origin: int, player: Player, mode: GameMode) -> TurnResult:
    """
    Sow from `origin` and keep sowing while the decision is REPEAT.
    `counts` holds the final board when this returns.
    """
    traces: List[Trace] = []
    captures: List[CaptureRecord] = []
    index = origin

    while True:
        index, trace = sow(counts, index, player)
        traces.append(trace)
        outcome, capture = decide(counts, index, player, mode)
        if capture is not None:
            captures.append(capture)
        if outcome is not Outcome.REPEAT:
            break
        logger.debug("avalanche: %s sows again from %d", player.label, index)

    next_player = player if outcome is Outcome.CONTINUE else player.flip()
    return TurnResult(
        player=player,
        outcome=outcome,
        next_player=next_player,
        traces=tuple(traces),
        captures=tuple(captures),
    )

# ---------------------------------------------------------------------
# Game over & scoring
# ---------------------------------------------------------------------

def _sweep(counts: List[int], player: Player) -> CaptureRecord:
    pits = pit_range(player)
    store = store_of(player)
    stones = sum(counts[i] for i in pits)
    for i in pits:
        counts[i] = 0
    counts[store] += stones
    logger.info("swept %d remaining stones into %s's store", stones, player.label)
    return CaptureRecord(pits=tuple(pits), store=store, stones=stones)

def check_game_over(counts: List[int], mode: GameMode) -> Optional[GameOverResult]:
    """
    Return None while both sides still hold stones. Otherwise finish the game:
    in Capture mode the side that still has stones sweeps them into its own
    store (mutating `counts`); Avalanche never sweeps. Highest store wins,
    equal stores are a draw.
    """
    empty_one = side_empty(counts, Player.ONE)
    empty_two = side_empty(counts, Player.TWO)
    if not empty_one and not empty_two:
        return None

    sweep = None
    if mode is GameMode.CAPTURE:
        if not empty_one:
            sweep = _sweep(counts, Player.ONE)
        elif not empty_two:
            sweep = _sweep(counts, Player.TWO)

    score_one, score_two = scores(counts)
    if score_one > score_two:
        winner: Optional[Player] = Player.ONE
    elif score_two > score_one:
        winner = Player.TWO
    else:
        winner = None

    logger.info(
        "game over (%s): %d-%d, %s",
        mode.value, score_one, score_two, winner.label + " wins" if winner is not None else "draw",
    )
    return GameOverResult(winner=winner, scores=(score_one, score_two), sweep=sweep)
