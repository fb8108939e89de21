"""
learn_groups – Generation-specific move learning rule sets.

Each game context learns moves by its own rules (learnsets, tutors, TMs).
Mainline games share one group per generation; the side-series remakes
and Legends: Arceus carry their own.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from legality.config import EARLIEST_FORMAT, LATEST_FORMAT, GameContext

if TYPE_CHECKING:
    from legality.creature import Creature


class LearnGroup(str, Enum):
    GEN1 = "gen1"
    GEN2 = "gen2"
    GEN3 = "gen3"
    GEN4 = "gen4"
    GEN5 = "gen5"
    GEN6 = "gen6"
    GEN7 = "gen7"
    LGPE = "gen7b"
    GEN8 = "gen8"
    PLA = "gen8a"
    BDSP = "gen8b"
    GEN9 = "gen9"

    @property
    def generation(self) -> int:
        """Mainline generation this group belongs to."""
        return int(self.value[3])

    @property
    def is_side_context(self) -> bool:
        return len(self.value) > 4


_CONTEXT_GROUPS = {
    GameContext.LGPE: LearnGroup.LGPE,
    GameContext.BDSP: LearnGroup.BDSP,
    GameContext.PLA: LearnGroup.PLA,
}

_GENERATION_GROUPS = {
    1: LearnGroup.GEN1,
    2: LearnGroup.GEN2,
    3: LearnGroup.GEN3,
    4: LearnGroup.GEN4,
    5: LearnGroup.GEN5,
    6: LearnGroup.GEN6,
    7: LearnGroup.GEN7,
    8: LearnGroup.GEN8,
    9: LearnGroup.GEN9,
}


def group_for_generation(generation: int) -> LearnGroup:
    """Mainline group for a generation, clamped to the known range."""
    generation = max(EARLIEST_FORMAT, min(LATEST_FORMAT, generation))
    return _GENERATION_GROUPS[generation]


def current_group(creature: Creature) -> LearnGroup:
    """Rule set that applies to the creature where it currently lives."""
    if creature.context in _CONTEXT_GROUPS:
        return _CONTEXT_GROUPS[creature.context]
    return group_for_generation(creature.format)
