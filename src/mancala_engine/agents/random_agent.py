# Random-move opponent (STATE-BASED)
from __future__ import annotations
from typing import Dict, Optional

import numpy as np

from mancala_engine.engine.game import legal_actions


def random_move(state: Dict, rng: Optional[np.random.Generator] = None) -> Optional[int]:
    """Uniform choice among the current player's non-empty pits; None if there is none."""
    acts = legal_actions(state)
    if not acts:
        return None
    rng = rng if rng is not None else np.random.default_rng()
    return int(acts[rng.integers(len(acts))])

def first_move(state: Dict) -> Optional[int]:
    acts = legal_actions(state)
    return int(acts[0]) if acts else None
