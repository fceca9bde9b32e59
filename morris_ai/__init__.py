"""Nine Men's Morris engine: bitboard rules, mobility evaluation and cached minimax search"""

__version__ = "1.0.0"
