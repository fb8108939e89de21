"""
move_sources – How each currently-known move was acquired.

The move-source classifier upstream tags every slot of the moveset with
a LearnMethod; the evolution checks only trust that classification and
never recompute it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


# ── Learn methods ───────────────────────────────────────────────────────────

class LearnMethod(str, Enum):
    EMPTY = "empty"                             # Unused slot
    INITIAL = "initial"                         # Known when encountered
    LEVEL_UP = "level_up"
    RELEARN = "relearn"                         # Move Reminder
    TM = "tm"
    TR = "tr"
    HM = "hm"
    TUTOR = "tutor"
    EGG_MOVE = "egg_move"                       # Inherited from a parent
    INHERITED_LEVEL_UP = "inherited_level_up"   # Parent's level-up move passed to egg
    SPECIAL_EGG = "special_egg"                 # Event / gift egg moves
    SHARED_EGG_MOVE = "shared_egg_move"         # Picnic egg move sharing
    SHEDINJA = "shedinja"                       # Copied from Ninjask's line
    EVENT = "event"
    SKETCH = "sketch"
    UNKNOWN = "unknown"

    @property
    def is_egg_source(self) -> bool:
        """Moves that come through breeding and are verified elsewhere."""
        return self in _EGG_SOURCES


_EGG_SOURCES = frozenset({LearnMethod.EGG_MOVE, LearnMethod.INHERITED_LEVEL_UP})


# ── Move slot ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class MoveSlot:
    """One of the four current moves plus where it came from."""
    move: int
    method: LearnMethod = LearnMethod.UNKNOWN

    @property
    def is_egg_source(self) -> bool:
        return self.method.is_egg_source


def build_moveset(moves: Iterable[Tuple[int, LearnMethod]]) -> Tuple[MoveSlot, ...]:
    """Convenience builder: [(move, method), ...] → tuple of MoveSlot."""
    return tuple(MoveSlot(move, method) for move, method in moves)
