from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass
class TTEntry:
    score: int
    best: int | None  # successor state chosen at this node


class TranspositionTable:
    """Search results keyed by (remaining depth, state), one dict per depth.

    Entries are never evicted; the table lives as long as its owning searcher.
    Results are stored without the alpha/beta window that produced them.
    """

    def __init__(self, levels: int = 7) -> None:
        self.levels: List[Dict[int, TTEntry]] = [{} for _ in range(levels)]
        self.stats = {"lookups": 0, "hits": 0, "stores": 0, "replacements": 0}

    def _level(self, depth: int) -> Dict[int, TTEntry]:
        while depth >= len(self.levels):
            self.levels.append({})
        return self.levels[depth]

    def probe(self, depth: int, state: int) -> TTEntry | None:
        self.stats["lookups"] += 1
        e = self._level(depth).get(state)
        if e is not None:
            self.stats["hits"] += 1
        return e

    def save(self, depth: int, state: int, score: int, best: int | None) -> None:
        self.stats["stores"] += 1
        level = self._level(depth)
        if state in level:
            self.stats["replacements"] += 1
        level[state] = TTEntry(score=score, best=best)

    def clear(self) -> None:
        for level in self.levels:
            level.clear()

    def __len__(self) -> int:
        return sum(len(level) for level in self.levels)
