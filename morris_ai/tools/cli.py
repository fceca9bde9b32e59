from __future__ import annotations

import argparse
import logging
import random
import sys

from morris_ai.engine.bitboard import BLACK, WHITE
from morris_ai.engine.notation import render_board
from morris_ai.engine.search import ALGORITHMS
from morris_ai.game import Game
from morris_ai.logging_setup import log_event, setup_logging
from morris_ai.players import PLAYER_KINDS, make_player
from morris_ai.settings import ConfigError, load_config, validate_config


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="morris-play", description="Play one game of Nine Men's Morris on the console")
    p.add_argument("--white", choices=PLAYER_KINDS, help="White player kind")
    p.add_argument("--black", choices=PLAYER_KINDS, help="Black player kind")
    p.add_argument("--depth", type=int, help="Search depth for ai players (plies)")
    p.add_argument("--algorithm", choices=ALGORITHMS, help="Search algorithm for ai players")
    p.add_argument("--seed", type=int, help="Random seed for random players")
    p.add_argument("--max-plies", type=int, help="Stop the game as a draw after this many plies")
    p.add_argument("--config", default=None, help="Configuration file path")
    p.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        print(f"morris-play: {e}", file=sys.stderr)
        return 2

    if args.white:
        cfg.game.white = args.white
    if args.black:
        cfg.game.black = args.black
    if args.depth is not None:
        cfg.engine.depth = args.depth
    if args.algorithm:
        cfg.engine.algorithm = args.algorithm
    if args.seed is not None:
        cfg.game.seed = args.seed
    if args.max_plies is not None:
        cfg.game.max_plies = args.max_plies
    if args.log_level:
        cfg.logging.level = args.log_level
    try:
        validate_config(cfg)
    except ConfigError as e:
        print(f"morris-play: {e}", file=sys.stderr)
        return 2

    setup_logging(overwrite=cfg.logging.overwrite, level=cfg.logging.level_no)
    logger = logging.getLogger(__name__)

    rng = random.Random(cfg.game.seed)
    limits = cfg.engine.limits()
    white = make_player(cfg.game.white, WHITE, limits, rng)
    black = make_player(cfg.game.black, BLACK, limits, rng)
    game = Game(white, black, max_plies=cfg.game.max_plies)

    try:
        print(render_board(game.state))
        while game.plies < game.max_plies and game.step():
            print(game.history[-1].text)
            print()
            print(render_board(game.state))
    except (KeyboardInterrupt, EOFError):
        logger.info("Game interrupted by user")
        return 1
    except Exception as e:
        logger.exception("Error during game: %s", e)
        return 1

    if game.winner is None:
        print(f"Draw after {game.plies} plies")
    else:
        print(f"{'White' if game.winner == WHITE else 'Black'} Wins!")
    log_event("play", "game_over", winner=game.winner, plies=game.plies, white=cfg.game.white, black=cfg.game.black)
    return 0


if __name__ == "__main__":
    sys.exit(main())
