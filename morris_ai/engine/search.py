from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Tuple

from .bitboard import has_fewer_than_three
from .eval import evaluate
from .movegen import generate_moves
from .tt import TranspositionTable

logger = logging.getLogger(__name__)

# Full window of the root call (32-bit signed range).
SCORE_MIN = -(2 ** 31)
SCORE_MAX = 2 ** 31 - 1

ALGORITHMS = ("alphabeta", "minimax")


class NoLegalMoveError(Exception):
    """Raised when the agent is asked to move in a position it has already lost."""

    def __init__(self, state: int) -> None:
        super().__init__(f"no legal move from state {state:#018x}")
        self.state = state


@dataclass
class SearchLimits:
    max_depth: int = 6
    algorithm: str = "alphabeta"


@dataclass
class SearchResult:
    best: int | None
    score: int
    depth: int
    nodes: int
    cache_hits: int
    time_ms: int


class Searcher:
    """Depth-limited minimax / alpha-beta agent playing for `perspective`.

    The per-depth cache is kept across calls for the lifetime of the searcher,
    so one searcher must only ever play one side.
    """

    def __init__(self, perspective: int, limits: SearchLimits | None = None) -> None:
        self.perspective = perspective
        self.limits = limits or SearchLimits()
        if self.limits.algorithm not in ALGORITHMS:
            raise ValueError(f"unknown search algorithm: {self.limits.algorithm}")
        if self.limits.max_depth < 1:
            raise ValueError(f"search depth must be at least 1, got {self.limits.max_depth}")
        self.tt = TranspositionTable(levels=self.limits.max_depth + 1)
        self.nodes = 0
        self.cache_hits = 0

    def search(self, state: int) -> SearchResult:
        start = time.perf_counter()
        self.nodes = 0
        self.cache_hits = 0
        depth = self.limits.max_depth
        if self.limits.algorithm == "minimax":
            score, best = self.minimax(state, depth, True)
        else:
            score, best = self.alphabeta(state, depth, SCORE_MIN, SCORE_MAX, True)
        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "search %s depth=%d score=%d nodes=%d hits=%d cached=%d time_ms=%d",
            self.limits.algorithm, depth, score, self.nodes, self.cache_hits, len(self.tt), elapsed_ms,
        )
        return SearchResult(best, score, depth, self.nodes, self.cache_hits, elapsed_ms)

    def choose_move(self, state: int) -> int:
        res = self.search(state)
        if res.best is None:
            raise NoLegalMoveError(state)
        return res.best

    def minimax(self, state: int, depth: int, maximizing: bool) -> Tuple[int, int | None]:
        entry = self.tt.probe(depth, state)
        if entry is not None:
            self.cache_hits += 1
            return entry.score, entry.best
        self.nodes += 1
        children = generate_moves(state)
        if depth == 0 or has_fewer_than_three(state) or not children:
            return evaluate(state, self.perspective, children), None

        best: int | None = None
        if maximizing:
            best_score = SCORE_MIN
            for child in children:
                score, _ = self.minimax(child, depth - 1, False)
                if score > best_score:
                    best_score = score
                    best = child
        else:
            best_score = SCORE_MAX
            for child in children:
                score, _ = self.minimax(child, depth - 1, True)
                if score < best_score:
                    best_score = score
                    best = child
        self.tt.save(depth, state, best_score, best)
        return best_score, best

    def alphabeta(self, state: int, depth: int, alpha: int, beta: int, maximizing: bool) -> Tuple[int, int | None]:
        # A cached entry is returned as is, whatever window produced it.
        entry = self.tt.probe(depth, state)
        if entry is not None:
            self.cache_hits += 1
            return entry.score, entry.best
        self.nodes += 1
        children = generate_moves(state)
        if depth == 0 or has_fewer_than_three(state) or not children:
            return evaluate(state, self.perspective, children), None

        best: int | None = None
        if maximizing:
            best_score = SCORE_MIN
            for child in children:
                score, _ = self.alphabeta(child, depth - 1, alpha, beta, False)
                if score > best_score:
                    if score > alpha:
                        alpha = score
                    best_score = score
                    best = child
                if beta <= alpha:
                    break
        else:
            best_score = SCORE_MAX
            for child in children:
                score, _ = self.alphabeta(child, depth - 1, alpha, beta, True)
                if score < best_score:
                    if score < beta:
                        beta = score
                    best_score = score
                    best = child
                if beta <= alpha:
                    break
        self.tt.save(depth, state, best_score, best)
        return best_score, best
