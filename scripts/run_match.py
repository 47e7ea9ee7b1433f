#!/usr/bin/env python3
"""Play a batch of games between two policies and print a JSON summary."""

import argparse
import dataclasses
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import numpy as np
import yaml
from tqdm.auto import trange

from othello.evaluation import POLICY_NAMES, EvaluationResult, MatchConfig, build_policy, play_game

logger = logging.getLogger(__name__)


def load_yaml_config(path_str: Optional[str]) -> Dict:
    if not path_str:
        return {}
    path = Path(path_str)
    if not path.exists():
        logger.warning("Config file %s not found; using defaults", path)
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def build_config(args: argparse.Namespace, cfg: Dict) -> MatchConfig:
    known = {field.name for field in dataclasses.fields(MatchConfig)}
    unknown = sorted(set(cfg) - known)
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
    config = MatchConfig(**{key: value for key, value in cfg.items() if key in known})
    overrides = {
        "episodes": args.episodes,
        "black_policy": args.black,
        "white_policy": args.white,
        "temperature": args.temperature,
        "seed": args.seed,
    }
    return dataclasses.replace(config, **{key: value for key, value in overrides.items() if value is not None})


def run_match(config: MatchConfig, *, progress: bool = True) -> EvaluationResult:
    rng = np.random.default_rng(config.seed)
    policy_black = build_policy(config.black_policy)
    policy_white = build_policy(config.white_policy)
    logger.info(
        "Playing %d games: %s (black) vs %s (white)",
        config.episodes,
        config.black_policy,
        config.white_policy,
    )
    episodes = trange(config.episodes, desc="Games", disable=not progress)
    games = [
        play_game(policy_black, policy_white, rng=rng, temperature=config.temperature)
        for _ in episodes
    ]
    return EvaluationResult.from_games(games)


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default="configs/match.yaml")
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--black", choices=POLICY_NAMES)
    parser.add_argument("--white", choices=POLICY_NAMES)
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    config = build_config(args, load_yaml_config(args.config))
    result = run_match(config, progress=not args.no_progress)

    output = {
        "config": dataclasses.asdict(config),
        "games": result.games_played,
        "black_wins": result.black_wins,
        "white_wins": result.white_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "average_margin": result.average_margin,
        "black_winrate": result.winrate_black(),
        "white_winrate": result.winrate_white(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
