"""Bitboard rules, evaluation and search for Nine Men's Morris"""

from .bitboard import WHITE, BLACK, INITIAL_STATE
from .rules import initial_state, legal_successors, is_terminal, winner, evaluate, agent_choose_move
from .search import Searcher, SearchLimits, SearchResult, NoLegalMoveError

__all__ = [
    'WHITE',
    'BLACK',
    'INITIAL_STATE',
    'initial_state',
    'legal_successors',
    'is_terminal',
    'winner',
    'evaluate',
    'agent_choose_move',
    'Searcher',
    'SearchLimits',
    'SearchResult',
    'NoLegalMoveError',
]
