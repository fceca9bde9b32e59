"""Turn loop: asks each side's player for a move until one side has lost."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .engine.bitboard import BLACK, SIDE_NAMES, WHITE, side_to_move
from .engine.notation import describe_move
from .engine.rules import initial_state, is_terminal, legal_successors
from .players import IllegalMoveError, Player

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    ply: int
    mover: int
    before: int
    after: int
    text: str


@dataclass
class GameResult:
    winner: Optional[int]  # None for a game stopped at max_plies
    plies: int
    start: int
    history: List[MoveRecord] = field(default_factory=list)

    @property
    def states(self) -> List[int]:
        """Every position of the game, the start included."""
        return [self.start] + [r.after for r in self.history]

    @property
    def winner_name(self) -> str:
        return "draw" if self.winner is None else SIDE_NAMES[self.winner].lower()


class Game:
    def __init__(
        self,
        white: Player,
        black: Player,
        state: Optional[int] = None,
        max_plies: int = 400,
    ) -> None:
        self.players = {WHITE: white, BLACK: black}
        self.state = initial_state() if state is None else state
        self.start = self.state
        self.max_plies = max_plies
        self.history: List[MoveRecord] = []
        self.winner: Optional[int] = None
        self.illegal_attempts = 0

    @property
    def plies(self) -> int:
        return len(self.history)

    def play_move(self, proposal: int, legal: Optional[List[int]] = None) -> MoveRecord:
        """Apply `proposal` if it is a legal successor of the current state."""
        if legal is None:
            legal = legal_successors(self.state)
        if proposal not in legal:
            raise IllegalMoveError(self.state, proposal)
        before = self.state
        record = MoveRecord(self.plies + 1, side_to_move(before), before, proposal, describe_move(before, proposal))
        self.history.append(record)
        self.state = proposal
        logger.info("ply %d %s", record.ply, record.text)
        return record

    def step(self) -> bool:
        """Play one ply. Returns False once the side to move has lost."""
        legal = legal_successors(self.state)
        if is_terminal(self.state, legal):
            self.winner = 1 - side_to_move(self.state)
            logger.info("%s wins after %d plies", SIDE_NAMES[self.winner], self.plies)
            return False

        player = self.players[side_to_move(self.state)]
        while True:
            proposal = player.propose(self.state, legal)
            try:
                self.play_move(proposal, legal)
                return True
            except IllegalMoveError:
                self.illegal_attempts += 1
                logger.warning("illegal move from %r", player)
                player.illegal_move(self.state, proposal)

    def play(self) -> GameResult:
        while self.plies < self.max_plies:
            if not self.step():
                break
        else:
            logger.info("game stopped at max_plies=%d", self.max_plies)
        return GameResult(self.winner, self.plies, self.start, list(self.history))
