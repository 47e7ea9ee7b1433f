import argparse

import pytest

from othello.evaluation import MatchConfig

from scripts.run_match import build_config, load_yaml_config, run_match


def make_args(**overrides):
    values = {"episodes": None, "black": None, "white": None, "temperature": None, "seed": None}
    values.update(overrides)
    return argparse.Namespace(**values)


def test_load_yaml_config(tmp_path):
    path = tmp_path / "match.yaml"
    path.write_text("episodes: 3\nwhite_policy: positional\n")
    assert load_yaml_config(path.as_posix()) == {"episodes": 3, "white_policy": "positional"}
    assert load_yaml_config((tmp_path / "missing.yaml").as_posix()) == {}
    assert load_yaml_config(None) == {}


def test_cli_flags_override_yaml():
    cfg = {"episodes": 3, "white_policy": "positional", "seed": 1, "unused": True}
    config = build_config(make_args(episodes=5, black="random"), cfg)
    assert config == MatchConfig(episodes=5, black_policy="random", white_policy="positional", seed=1)


def test_run_match_small():
    config = MatchConfig(episodes=2, black_policy="greedy", white_policy="random", seed=0)
    result = run_match(config, progress=False)
    assert result.games_played == 2
    assert result.black_wins + result.white_wins + result.draws == 2


def test_run_match_unknown_policy():
    with pytest.raises(ValueError):
        run_match(MatchConfig(episodes=1, black_policy="alphabeta"), progress=False)
