# Stone sowing around the ring
from __future__ import annotations
import logging
from typing import List, Tuple

from mancala_engine.engine.board import LENGTH, Player, store_of

logger = logging.getLogger(__name__)

Trace = Tuple[int, ...]


def sow(counts: List[int], origin: int, player: Player) -> Tuple[int, Trace]:
    """
    Pick up every stone in `origin` and drop them one by one into the following
    pits, skipping the opponent's store. `counts` is mutated in place.

    Returns (landing index, trace). The trace starts with `origin` and then
    lists every pit that received a stone, in sowing order.
    The caller must not pass an empty origin.
    """
    stack = counts[origin]
    counts[origin] = 0

    skip = store_of(player.flip())
    index = origin
    trace = [origin]

    while stack > 0:
        index = (index + 1) % LENGTH
        if index == skip:
            continue
        counts[index] += 1
        stack -= 1
        trace.append(index)

    logger.debug("sow %s from %d landed on %d (%d stones)", player.label, origin, index, len(trace) - 1)
    return index, tuple(trace)
