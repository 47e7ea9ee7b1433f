import json
from pathlib import Path

import numpy as np
import pytest

from othello import Disc, Move, OthelloGame
from othello.core import IllegalMoveError
from othello.policies import RandomPolicy

from scripts.play_vs_ai import parse_move, replay_logged_game, select_ai_move, suggest_hint


def create_sample_log(path: Path) -> None:
    moves = [
        {"move_index": 0, "actor": "human", "player": "BLACK", "move": [2, 3]},
        {"move_index": 1, "actor": "ai", "player": "WHITE", "move": [2, 4]},
    ]
    log = {"metadata": {}, "moves": moves}
    path.write_text(json.dumps(log))


def test_replay_logged_game(tmp_path):
    log_path = tmp_path / "game.json"
    create_sample_log(log_path)
    summary = replay_logged_game(log_path, verbose=False)
    assert summary["moves"] == 2
    assert summary["result"] == "ongoing"
    assert summary["score"] == [3, 3]
    board = summary["board"]
    assert board[2][3] == Disc.BLACK
    assert board[2][4] == Disc.WHITE
    assert board[3][4] == Disc.WHITE


def test_replay_rejects_illegal_log(tmp_path):
    log_path = tmp_path / "bad.json"
    log_path.write_text(json.dumps({"moves": [{"player": "WHITE", "move": [2, 4]}]}))
    with pytest.raises(IllegalMoveError):
        replay_logged_game(log_path, verbose=False)


def test_parse_move():
    assert parse_move("2 3") == Move(2, 3)
    assert parse_move("4,5") == Move(4, 5)
    assert parse_move("x y") is None
    assert parse_move("1") is None


def test_select_ai_move_defaults_to_greedy():
    game = OthelloGame()
    game.commit_move(2, 3, Disc.BLACK)
    move = select_ai_move(game, None, 1.0, np.random.default_rng(0))
    assert move == game.greedy_move(Disc.WHITE)


def test_select_ai_move_with_policy_is_legal():
    game = OthelloGame()
    rng = np.random.default_rng(0)
    move = select_ai_move(game, RandomPolicy(), 1.0, rng)
    assert move in game.valid_moves(Disc.BLACK)


def test_suggest_hint_is_legal():
    game = OthelloGame()
    assert suggest_hint(game) in game.valid_moves(Disc.BLACK)
