"""Run automated games between two player kinds and summarise the results"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from datetime import datetime
from typing import Dict, List

import orjson

from ..engine.bitboard import BLACK, WHITE
from ..engine.notation import moves_to_string
from ..engine.search import ALGORITHMS, SearchLimits
from ..game import Game, GameResult
from ..logging_setup import log_event, setup_logging
from ..players import make_player

AUTOMATED_KINDS = ("random", "greedy", "ai")


def play_match(
    white: str,
    black: str,
    games: int,
    limits: SearchLimits,
    seed: int | None = None,
    max_plies: int = 400,
) -> List[GameResult]:
    """Play `games` games; each game gets fresh players (and fresh search caches)."""
    rng = random.Random(seed)
    results: List[GameResult] = []
    for i in range(games):
        game = Game(
            make_player(white, WHITE, limits, rng),
            make_player(black, BLACK, limits, rng),
            max_plies=max_plies,
        )
        res = game.play()
        results.append(res)
        log_event("match", "game_over", game=i, winner=res.winner_name, plies=res.plies)
    return results


def summarise(results: List[GameResult]) -> Dict[str, int]:
    totals = {"white": 0, "black": 0, "draw": 0}
    for res in results:
        totals[res.winner_name] += 1
    return totals


def main(argv: list[str] | None = None) -> int:
    setup_logging(overwrite=False, level=logging.INFO)
    logger = logging.getLogger(__name__)
    parser = argparse.ArgumentParser(prog="morris-match", description="Play automated Nine Men's Morris games")
    parser.add_argument('--white', choices=AUTOMATED_KINDS, default='ai', help='White player kind (default: ai)')
    parser.add_argument('--black', choices=AUTOMATED_KINDS, default='random', help='Black player kind (default: random)')
    parser.add_argument('--games', type=int, default=10, help='Number of games (default: 10)')
    parser.add_argument('--depth', type=int, default=4, help='Search depth for ai players (default: 4)')
    parser.add_argument('--algorithm', choices=ALGORITHMS, default='alphabeta')
    parser.add_argument('--max-plies', type=int, default=400)
    parser.add_argument('--seed', type=int, help='Random seed for reproducibility')
    parser.add_argument('--output', help='Output file for match results (JSON)')
    args = parser.parse_args(argv)

    if args.depth < 1 or args.games < 1 or args.max_plies < 1:
        parser.error("--depth, --games and --max-plies must be positive")

    try:
        logger.info("Running %d games: %s (White) vs %s (Black)", args.games, args.white, args.black)
        limits = SearchLimits(max_depth=args.depth, algorithm=args.algorithm)
        results = play_match(args.white, args.black, args.games, limits, args.seed, args.max_plies)
        totals = summarise(results)
        logger.info("Results: White %d, Black %d, Draws %d", totals["white"], totals["black"], totals["draw"])

        if args.output:
            output_data = {
                'timestamp': datetime.now().isoformat(),
                'config': {
                    'white': args.white,
                    'black': args.black,
                    'games': args.games,
                    'depth': args.depth,
                    'algorithm': args.algorithm,
                    'max_plies': args.max_plies,
                    'seed': args.seed,
                },
                'totals': totals,
                'games': [
                    {
                        'winner': res.winner_name,
                        'plies': res.plies,
                        'moves': moves_to_string(res.states),
                    }
                    for res in results
                ],
            }
            with open(args.output, 'wb') as f:
                f.write(orjson.dumps(output_data, option=orjson.OPT_INDENT_2))
            logger.info("Results saved to %s", args.output)
    except KeyboardInterrupt:
        logger.info("Match interrupted by user")
        return 1
    except Exception as e:
        logger.exception("Error running match: %s", e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
