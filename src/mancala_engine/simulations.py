# Random-vs-random self play for both rule variants
import argparse
import logging
import time
from typing import Iterable, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from mancala_engine.agents import random_move
from mancala_engine.engine.board import GameMode
from mancala_engine.engine.game import Game

logger = logging.getLogger(__name__)

# Safety net for the simulation loop only; real games always terminate
MAX_ACTIVATIONS = 10_000


def simulate_game(mode: GameMode, seed: Optional[int] = None) -> dict:
    """Play one game to the end with both seats picking random pits."""
    rng = np.random.default_rng(seed)
    game = Game(mode)
    start_time = time.time()
    activations = sows = captures = 0

    while not game.is_over and activations < MAX_ACTIVATIONS:
        move = random_move(game.to_state(), rng)
        if move is None:
            break
        report = game.activate_pit(move)
        activations += 1
        sows += len(report.traces)
        captures += len(report.captures)

    p1_score, p2_score = game.scores()
    winner = game.winner
    return {
        "mode": GameMode(mode).value,
        "p1_score": p1_score,
        "p2_score": p2_score,
        "winner": "Draw" if winner is None else winner.label,
        "finished": game.is_over,
        "activations": activations,
        "sows": sows,
        "captures": captures,
        "time": time.time() - start_time,
    }

def run_simulations(num_games: int = 100, modes: Iterable[GameMode] = tuple(GameMode),
                    seed: Optional[int] = None) -> pd.DataFrame:
    results = []
    seeds = np.random.SeedSequence(seed)
    modes = list(modes)
    children = seeds.spawn(num_games * len(modes))
    for m_idx, mode in enumerate(modes):
        for g in tqdm(range(num_games), desc=f"{GameMode(mode).value}", leave=False):
            child = children[m_idx * num_games + g]
            result = simulate_game(mode, seed=int(child.generate_state(1)[0]))
            results.append({
                "Mode": result["mode"],
                "Player1_Score": result["p1_score"],
                "Player2_Score": result["p2_score"],
                "Winner": result["winner"],
                "Finished": result["finished"],
                "Activations": result["activations"],
                "Sows": result["sows"],
                "Captures": result["captures"],
                "Time_Seconds": round(result["time"], 3),
            })
    return pd.DataFrame(results)

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Win rate per mode, one column per outcome."""
    return (df.groupby("Mode")["Winner"]
              .value_counts(normalize=True)
              .unstack(fill_value=0.0))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulate random-vs-random Mancala games.")
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--mode", choices=[m.value for m in GameMode], action="append",
                        help="Mode to simulate (repeatable, default: all)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--out", default="mancala_simulations.csv")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("mancala_engine.engine").setLevel(logging.WARNING)
    modes = [GameMode(m) for m in args.mode] if args.mode else list(GameMode)
    df = run_simulations(args.games, modes, seed=args.seed)
    df.to_csv(args.out, index=False)
    logger.info("wrote %d games to %s", len(df), args.out)

    print("\nSummary Statistics:")
    print(summarize(df))
    print(df.groupby("Mode")[["Player1_Score", "Player2_Score", "Sows", "Captures"]].mean())


if __name__ == "__main__":
    main()
