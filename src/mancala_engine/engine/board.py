# Board geometry for the 14-pit ring
# Layout (flat indices):
#   0..5   player One pits     6   player One store
#   7..12  player Two pits    13   player Two store
# Sowing runs in increasing index order and wraps from 13 back to 0.

from __future__ import annotations
from enum import Enum, IntEnum
from typing import List

LENGTH = 14
STORE_ONE = (LENGTH - 1) // 2   # 6
STORE_TWO = LENGTH - 1          # 13
INITIAL_STONES = 6


class Player(IntEnum):
    ONE = 0
    TWO = 1

    def flip(self) -> "Player":
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"Player {int(self) + 1}"


class GameMode(str, Enum):
    AVALANCHE = "avalanche"
    CAPTURE = "capture"


# ---------------------------------------------------------------------
# Geometry / ownership queries
# ---------------------------------------------------------------------

def is_store(index: int) -> bool:
    return index == STORE_ONE or index == STORE_TWO

def owner(index: int) -> Player:
    return Player.ONE if index <= STORE_ONE else Player.TWO

def store_of(player: Player) -> int:
    return STORE_ONE if player is Player.ONE else STORE_TWO

def pit_range(player: Player) -> range:
    """The six sowable pits of `player`, own store excluded."""
    if player is Player.ONE:
        return range(0, STORE_ONE)
    return range(STORE_ONE + 1, STORE_TWO)

def opposite(index: int) -> int:
    """Pit facing `index` across the board. Only meaningful for non-store pits."""
    return LENGTH - index - 2

def display_order() -> List[int]:
    """
    Presentation order used by the board layout: One's pits mirrored so both
    rows read left to right from the viewer, i.e. [6, 5, ..., 0, 7, ..., 13].
    """
    mid = (LENGTH - 2) // 2
    return [s if s > mid else mid - s for s in range(LENGTH)]

def initial_counts(stones: int = INITIAL_STONES) -> List[int]:
    return [0 if is_store(i) else stones for i in range(LENGTH)]
