"""Move sources for the game driver: human, random, greedy and search agents.

Every player answers ``propose(state, legal)`` with one successor state. The
driver checks the proposal against ``legal`` and calls ``illegal_move`` before
asking again when it is not a member.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from .engine.bitboard import SIDE_NAMES, make_state, side_mask, to_place
from .engine.eval import evaluate_for_mover
from .engine.notation import notation_to_point
from .engine.search import SearchLimits, Searcher
from .engine.topology import forms_mill, run_mask

logger = logging.getLogger(__name__)

PLAYER_KINDS = ("human", "random", "greedy", "ai")


class IllegalMoveError(ValueError):
    """A proposed successor is not among the legal ones."""

    def __init__(self, state: int, proposal: int) -> None:
        super().__init__(f"illegal move {proposal:#018x} from {state:#018x}")
        self.state = state
        self.proposal = proposal


class Player:
    kind = "abstract"

    def __init__(self, side: int) -> None:
        self.side = side

    def propose(self, state: int, legal: List[int]) -> int:
        raise NotImplementedError

    def illegal_move(self, state: int, proposal: int) -> None:
        # Automated players only pick from `legal`; a rejection means a bug.
        raise RuntimeError(f"{self.kind} player proposed an illegal move {proposal:#018x}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({SIDE_NAMES[self.side]})"


class HumanPlayer(Player):
    kind = "human"

    def __init__(
        self,
        side: int,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        super().__init__(side)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def _ask_point(self, prompt: str) -> int:
        while True:
            try:
                return notation_to_point(self.input_fn(prompt))
            except ValueError:
                self.output_fn("Unknown point, use names like a7 or d5.")

    def propose(self, state: int, legal: List[int]) -> int:
        own = side_mask(state, self.side)
        opp = side_mask(state, 1 - self.side)
        own_left = to_place(state, self.side)
        opp_left = to_place(state, 1 - self.side)

        if own_left > 0:
            dst = self._ask_point("Place piece at: ")
            new_own = own | (1 << dst)
            own_left -= 1
        else:
            src = self._ask_point("Take piece from: ")
            dst = self._ask_point("And place at: ")
            new_own = (own & ~(1 << src)) | (1 << dst)

        new_opp = opp
        if forms_mill(run_mask(own), run_mask(new_own)):
            victim = self._ask_point("Remove piece at: ")
            new_opp &= ~(1 << victim)
        return make_state(self.side, new_own, new_opp, own_left, opp_left)

    def illegal_move(self, state: int, proposal: int) -> None:
        self.output_fn("You made an illegal move!")


class RandomPlayer(Player):
    kind = "random"

    def __init__(self, side: int, rng: Optional[random.Random] = None) -> None:
        super().__init__(side)
        self.rng = rng or random.Random()

    def propose(self, state: int, legal: List[int]) -> int:
        return self.rng.choice(legal)


class GreedyPlayer(Player):
    """One ply lookahead: leave the opponent the worst position."""

    kind = "greedy"

    def propose(self, state: int, legal: List[int]) -> int:
        best = legal[0]
        best_score = None
        for child in legal:
            score = evaluate_for_mover(child)
            if best_score is None or score < best_score:
                best_score = score
                best = child
        return best


class AIPlayer(Player):
    kind = "ai"

    def __init__(self, side: int, limits: Optional[SearchLimits] = None) -> None:
        super().__init__(side)
        self.searcher = Searcher(side, limits)

    def propose(self, state: int, legal: List[int]) -> int:
        return self.searcher.choose_move(state)


def make_player(
    kind: str,
    side: int,
    limits: Optional[SearchLimits] = None,
    rng: Optional[random.Random] = None,
) -> Player:
    logger.debug("creating %s player for %s", kind, SIDE_NAMES[side])
    if kind == "human":
        return HumanPlayer(side)
    if kind == "random":
        return RandomPlayer(side, rng)
    if kind == "greedy":
        return GreedyPlayer(side)
    if kind == "ai":
        return AIPlayer(side, limits)
    raise ValueError(f"unknown player kind: {kind}")
