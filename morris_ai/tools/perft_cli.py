from __future__ import annotations

import argparse
from time import perf_counter

from morris_ai.engine.bitboard import INITIAL_STATE
from morris_ai.engine.perft import parse_state, perft


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="morris-perft")
    p.add_argument("--depth", type=int, required=True)
    p.add_argument("--state", type=str, default=None, help="packed state as hex, e.g. 0x0900000009000000")
    args = p.parse_args(argv)

    state = INITIAL_STATE
    if args.state:
        try:
            state = parse_state(args.state)
        except ValueError as e:
            p.error(str(e))
    t0 = perf_counter()
    n = perft(state, args.depth)
    dt = perf_counter() - t0
    print(f"perft(d={args.depth})={n} in {dt:.3f}s")


if __name__ == "__main__":
    main()
