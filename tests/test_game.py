import numpy as np
import pytest

from mancala_engine.agents import random_move
from mancala_engine.engine import (
    Game,
    GameMode,
    GamePhase,
    Outcome,
    Player,
    legal_actions,
    new_game,
    pit_range,
    step,
    store_of,
)


def board(**pits):
    counts = [0] * 14
    for key, value in pits.items():
        counts[int(key[1:])] = value
    return counts


def test_opening_scenario():
    game = Game(GameMode.AVALANCHE)
    report = game.activate_pit(0)

    assert report is not None
    assert report.outcome is Outcome.CONTINUE
    assert report.traces == ((0, 1, 2, 3, 4, 5, 6),)
    assert game.current_player is Player.ONE
    assert game.counts[:7] == (0, 7, 7, 7, 7, 7, 1)
    assert not report.over

@pytest.mark.parametrize("index", [6, 7, 12, 13, 14, -1])
def test_invalid_activation_is_ignored(index):
    game = Game(GameMode.CAPTURE)
    before = game.to_state()
    assert game.activate_pit(index) is None
    assert game.to_state() == before

def test_empty_pit_is_ignored():
    game = Game(GameMode.AVALANCHE, counts=board(p1=2, p8=2))
    assert game.activate_pit(0) is None
    assert game.current_player is Player.ONE

def test_end_passes_turn_to_player_two():
    game = Game(GameMode.AVALANCHE, counts=board(p0=1, p7=1, p8=1))
    report = game.activate_pit(0)

    assert report.outcome is Outcome.END
    assert game.current_player is Player.TWO
    assert game.legal_pits() == [7, 8]

def test_last_stone_into_own_store_ends_capture_game_with_sweep():
    game = Game(GameMode.CAPTURE, counts=board(p5=1, p6=10, p7=2, p13=5))
    report = game.activate_pit(5)

    assert report.outcome is Outcome.CONTINUE
    assert report.over
    assert game.phase is GamePhase.OVER
    assert report.sweep.pits == tuple(range(7, 13))
    assert game.scores() == (11, 7)
    assert game.winner is Player.ONE
    assert sum(game.counts) == 18

def test_same_position_in_avalanche_keeps_stones_on_board():
    game = Game(GameMode.AVALANCHE, counts=board(p5=1, p6=10, p7=2, p13=5))
    report = game.activate_pit(5)

    assert report.over
    assert report.sweep is None
    assert game.counts[7] == 2
    assert game.scores() == (11, 5)

def test_finished_game_rejects_moves():
    game = Game(GameMode.CAPTURE, counts=board(p5=1, p6=10, p7=2, p13=5))
    game.activate_pit(5)

    assert game.legal_pits() == []
    assert game.activate_pit(0) is None

def test_animation_gate_blocks_until_finished():
    game = Game(GameMode.AVALANCHE, wait_for_animation=True)
    assert game.activate_pit(0) is not None
    assert not game.idle
    assert game.activate_pit(1) is None

    game.animation_finished()
    assert game.idle
    assert game.activate_pit(1) is not None

@pytest.mark.parametrize("mode", list(GameMode))
@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_games_conserve_stones(mode, seed):
    rng = np.random.default_rng(seed)
    game = Game(mode)
    total = sum(game.counts)

    for _ in range(2000):
        if game.is_over:
            break
        mover = game.current_player
        report = game.activate_pit(random_move(game.to_state(), rng))
        assert report is not None

        assert sum(game.counts) == total
        assert min(game.counts) >= 0
        for trace in report.traces:
            assert store_of(mover.flip()) not in trace[1:]

    assert game.is_over
    one_empty = all(game.counts[i] == 0 for i in pit_range(Player.ONE))
    two_empty = all(game.counts[i] == 0 for i in pit_range(Player.TWO))
    assert one_empty or two_empty

def test_state_round_trip():
    state = new_game(GameMode.CAPTURE)
    assert state == {
        "counts": [6, 6, 6, 6, 6, 6, 0, 6, 6, 6, 6, 6, 6, 0],
        "current_player": 0,
        "mode": "capture",
        "over": False,
        "winner": None,
    }
    assert Game.from_state(state).to_state() == state
    assert legal_actions(state) == [0, 1, 2, 3, 4, 5]

def test_step_returns_report_and_next_state():
    state = new_game()
    next_state, report = step(state, 2)

    # lands on pit 8 (7 stones), sows again and ends on the emptied pit 2
    assert report.traces == ((2, 3, 4, 5, 6, 7, 8), (8, 9, 10, 11, 12, 0, 1, 2))
    assert report.outcome is Outcome.END
    assert next_state["current_player"] == 1
    assert state["counts"][2] == 6

def test_malformed_snapshot_is_rejected():
    state = new_game()
    with pytest.raises(ValueError):
        Game.from_state(dict(state, counts=state["counts"][:13]))
    with pytest.raises(ValueError):
        Game.from_state(dict(state, counts=[-1] + state["counts"][1:]))
    with pytest.raises(ValueError):
        Game.from_state(dict(state, mode="kalah"))

def test_snapshot_with_empty_side_loads_as_finished():
    state = {"counts": board(p6=5, p7=3, p13=1), "current_player": 0, "mode": "capture"}
    game = Game.from_state(state)

    assert game.is_over
    assert game.winner is Player.ONE
    assert game.scores() == (5, 4)
    assert game.counts[7] == 0
    assert game.legal_pits() == []

def test_snapshot_with_empty_side_in_avalanche_keeps_stones():
    state = {"counts": board(p6=2, p7=3, p13=4), "current_player": 1, "mode": "avalanche"}
    game = Game.from_state(state)

    assert game.is_over
    assert game.winner is Player.TWO
    assert game.counts[7] == 3

def test_lost_stone_stops_the_turn(monkeypatch):
    import mancala_engine.engine.game as game_module

    real_resolve = game_module.resolve_turn

    def leaky_resolve(counts, origin, player, mode):
        result = real_resolve(counts, origin, player, mode)
        counts[1] -= 1
        return result

    monkeypatch.setattr(game_module, "resolve_turn", leaky_resolve)
    game = Game(GameMode.AVALANCHE)
    with pytest.raises(RuntimeError):
        game.activate_pit(0)
