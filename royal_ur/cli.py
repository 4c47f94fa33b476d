"""Command-line entry point: self-play training, showdowns and board display."""

from __future__ import annotations

import argparse
import os
import random
import sys

import numpy as np
from loguru import logger

from .evaluators.linear import LinearEvaluator
from .game.board import ENTER, Board
from .game.config import config, search_config, training_config
from .game.render import format_weights, render_board
from .strategy.expectimax import ExpectimaxStrategy
from .strategy.registry import STRATEGY_REGISTRY
from .strategy.registry import create as create_strategy
from .tournament import showdown
from .training import train_self_play


def seed_everything(seed: int) -> None:
    random.seed(seed)
    np.random.seed(seed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="royal-ur",
        description="Royal Game of Ur engine: expectimax play and self-play training",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("UR_LOG_LEVEL", "INFO"),
        help="Loguru level for stderr output (default: INFO).",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    duel = sub.add_parser("showdown", help="Play two strategies against each other")
    duel.add_argument("first", choices=sorted(STRATEGY_REGISTRY), help="Strategy A")
    duel.add_argument("second", choices=sorted(STRATEGY_REGISTRY), help="Strategy B")
    duel.add_argument(
        "--rounds",
        type=int,
        default=int(os.getenv("UR_ROUNDS", 500)),
        help="Rounds to play; each round is two games with seats swapped.",
    )
    duel.add_argument(
        "--depth",
        type=int,
        default=search_config.depth,
        help="Search depth for expectimax strategies.",
    )
    duel.add_argument("--seed", type=int, default=None, help="Optional RNG seed")

    train = sub.add_parser("train", help="Train the linear evaluator by self-play")
    train.add_argument("--games", type=int, default=training_config.games)
    train.add_argument("--alpha", type=float, default=training_config.alpha)
    train.add_argument("--seed", type=int, default=training_config.seed)
    train.add_argument("--log-every", type=int, default=training_config.log_every)
    train.add_argument(
        "--eval-rounds",
        type=int,
        default=0,
        help="After training, rounds of the trained agent against greedy.",
    )
    train.add_argument(
        "--eval-depth",
        type=int,
        default=search_config.depth,
        help="Search depth of the trained agent during evaluation.",
    )

    show = sub.add_parser("show", help="Render the initial board and its legal moves")
    show.add_argument(
        "--dice", type=int, default=None, help="Only list moves for this roll"
    )
    return parser


def _strategy_kwargs(name: str, depth: int, seed: int | None) -> dict:
    if name == ExpectimaxStrategy.name:
        return {"depth": depth}
    if name == "random":
        return {"rng_seed": seed}
    return {}


def _run_showdown(args: argparse.Namespace) -> int:
    if args.seed is not None:
        seed_everything(args.seed)
    first = create_strategy(
        args.first, **_strategy_kwargs(args.first, args.depth, args.seed)
    )
    second = create_strategy(
        args.second, **_strategy_kwargs(args.second, args.depth, args.seed)
    )
    result = showdown(first, second, args.rounds, seed=args.seed)
    print(f"{result.names[0]}: {result.wins[0]}/{result.games}")
    print(f"{result.names[1]}: {result.wins[1]}/{result.games}")
    if result.draws:
        print(f"unfinished: {result.draws}")
    return 0


def _run_train(args: argparse.Namespace) -> int:
    if args.seed is not None:
        seed_everything(args.seed)
    evaluator: LinearEvaluator = train_self_play(
        games=args.games,
        alpha=args.alpha,
        seed=args.seed,
        log_every=args.log_every,
    )
    print(format_weights(evaluator.weights))
    if args.eval_rounds > 0:
        agent = ExpectimaxStrategy.from_weights(
            evaluator.weights, depth=args.eval_depth
        )
        result = showdown(
            agent, create_strategy("greedy"), args.eval_rounds, seed=args.seed
        )
        print(f"trained vs greedy: {result.wins[0]}/{result.games}")
    return 0


def _run_show(args: argparse.Namespace) -> int:
    board = Board()
    print(render_board(board))
    rolls = range(config.MAX_ROLL + 1) if args.dice is None else [args.dice]
    for dice in rolls:
        moves = board.legal_moves(dice)
        labels = ["enter" if move == ENTER else str(move) for move in moves]
        print(f"dice {dice}: {', '.join(labels) if labels else 'no move'}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    if args.command == "showdown":
        return _run_showdown(args)
    if args.command == "train":
        return _run_train(args)
    if args.command == "show":
        if args.dice is not None and not 0 <= args.dice <= config.MAX_ROLL:
            parser.error(f"--dice must be within [0, {config.MAX_ROLL}]")
        return _run_show(args)
    parser.error(f"unknown command {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
