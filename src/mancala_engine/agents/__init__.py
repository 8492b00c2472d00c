# Agent registry: name -> move picker
from __future__ import annotations
import logging
from typing import Callable, Dict, Optional

from mancala_engine.agents.random_agent import first_move, random_move

logger = logging.getLogger(__name__)

# Profile name that marks the seat played by the computer
AI_NAME = "CPU"

AGENTS: Dict[str, Callable[[Dict], Optional[int]]] = {
    "random": random_move,
    "first": first_move,
}

_ALIASES = {
    "rand": "random",
    "cpu": "random",
    "leftmost": "first",
}


def available_agents():
    return sorted(AGENTS)

def pick_action(state: Dict, agent: str = "random") -> Optional[int]:
    name = (agent or "random").lower()
    name = _ALIASES.get(name, name)
    fn = AGENTS.get(name)
    if fn is None:
        logger.warning("unknown agent %r, falling back to first legal pit", agent)
        fn = first_move
    return fn(state)


__all__ = ["AI_NAME", "AGENTS", "available_agents", "first_move", "pick_action", "random_move"]
