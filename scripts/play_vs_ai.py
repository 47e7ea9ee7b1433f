#!/usr/bin/env python3
"""Play Othello against an AI opponent via the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from othello import Disc, GameResult, IllegalMoveError, Move, OthelloGame
from othello.env import render_board
from othello.evaluation import POLICY_NAMES, PositionalPolicy, build_policy
from othello.features import legal_move_mask
from othello.policies import Policy, select_action

logger = logging.getLogger(__name__)


def format_status(game: OthelloGame) -> str:
    black, white = game.score()
    return f"Black: {black}  White: {white}"


def select_ai_move(
    game: OthelloGame,
    policy: Optional[Policy],
    temperature: float,
    rng: np.random.Generator,
) -> Optional[Move]:
    player = game.current_player
    if policy is None:
        return game.greedy_move(player)
    state = game.state
    legal_mask = legal_move_mask(state)
    if not legal_mask.any():
        return None
    probs = policy.act(state, legal_mask) * legal_mask
    if probs.sum() <= 0:
        probs = legal_mask.astype(np.float32)
    probs = probs / probs.sum()
    return Move.from_index(select_action(probs, temperature, rng))


def suggest_hint(game: OthelloGame) -> Optional[Move]:
    state = game.state
    legal_mask = legal_move_mask(state)
    if not legal_mask.any():
        return None
    probs = PositionalPolicy().act(state, legal_mask)
    return Move.from_index(int(np.argmax(probs)))


def parse_move(raw: str) -> Optional[Move]:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2 or not all(part.lstrip("-").isdigit() for part in parts):
        return None
    return Move(int(parts[0]), int(parts[1]))


def prompt_human_move(game: OthelloGame) -> Move:
    moves = game.valid_moves(game.current_player)
    print("Legal moves: " + " ".join(f"({m.row},{m.col})" for m in moves))
    while True:
        raw = input("Your move as 'row col' (h for a hint, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Quitting the game.")
            sys.exit(0)
        if raw.lower() in {"h", "hint"}:
            hint = suggest_hint(game)
            if hint is not None:
                print(f"Hint: try ({hint.row},{hint.col}).")
            continue
        move = parse_move(raw)
        if move is None:
            print("Enter two numbers, for example: 2 3")
            continue
        if move in moves:
            return move
        print("That is not a legal move. Try again.")


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Saved game log to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    moves = data.get("moves", [])
    game = OthelloGame()
    if verbose:
        print("Replaying logged game.")
        print(render_board(game.board))
    for entry in moves:
        row, col = entry["move"]
        player = Disc[entry["player"]]
        if not game.commit_move(row, col, player):
            raise IllegalMoveError(f"Logged move {entry.get('move_index')} ({row},{col}) by {player.name} is illegal.")
        if verbose:
            actor = entry.get("actor", "unknown")
            print(f"{actor} ({player.name}) plays ({row},{col})")
            print(render_board(game.board))
    result = game.state.result
    summary = {
        "result": result.value,
        "moves": len(moves),
        "score": list(game.score()),
        "board": game.board.tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Result: {summary['result']}")
    return summary


def announce_result(game: OthelloGame) -> GameResult:
    result = game.state.result
    if result == GameResult.BLACK_WIN:
        print("Black wins!")
    elif result == GameResult.WHITE_WIN:
        print("White wins!")
    else:
        print("It's a tie.")
    return result


def play_interactive(args: argparse.Namespace) -> None:
    rng = np.random.default_rng(args.seed)
    policy_ai = None if args.ai == "greedy" else build_policy(args.ai)
    human = Disc[args.human.upper()]
    log_records: List[Dict] = []

    game = OthelloGame()
    move_index = 0
    while not game.is_game_over:
        player = game.current_player
        print("\nCurrent board:")
        print(render_board(game.board))
        print(format_status(game))
        print(f"To move: {player.name}")

        if game.has_no_valid_moves():
            logger.warning("%s has no legal move in an unfinished game; ending it", player.name)
            game.end_game()
            break

        if player == human:
            move = prompt_human_move(game)
            actor = "human"
        else:
            if args.ai_delay > 0:
                time.sleep(args.ai_delay)
            move = select_ai_move(game, policy_ai, args.temperature, rng)
            actor = "ai"
            print(f"AI ({player.name}) plays ({move.row},{move.col})")

        if not game.commit_move(move.row, move.col, player):
            raise IllegalMoveError(f"Move ({move.row},{move.col}) by {player.name} was rejected.")
        log_records.append(
            {
                "move_index": move_index,
                "actor": actor,
                "player": player.name,
                "move": [move.row, move.col],
            }
        )
        move_index += 1

        if not game.is_game_over and game.current_player == player:
            print(f"{player.opponent.name} has no legal move and passes.")

    print("\nFinal board:")
    print(render_board(game.board))
    print(format_status(game))
    result = announce_result(game)

    if args.log_file:
        metadata = {
            "human": human.name,
            "ai": args.ai,
            "temperature": args.temperature,
            "seed": args.seed,
            "result": result.value,
        }
        log_data = {"metadata": metadata, "moves": log_records}
        save_log(log_data, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Othello in the console against an AI.")
    parser.add_argument("--ai", choices=POLICY_NAMES, default="greedy")
    parser.add_argument("--human", choices=["black", "white"], default="black")
    parser.add_argument("--ai-delay", type=float, default=0.8, help="Seconds to wait before the AI moves")
    parser.add_argument("--temperature", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    play_interactive(args)


if __name__ == "__main__":
    main()
