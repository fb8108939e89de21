"""
learnsets – Move-learnability oracle.

The evolution checks only ever ask one question: "could this creature
have known this move at some point along its lineage?". Anything that
answers it can be plugged in (MoveLearnabilityOracle); LearnsetOracle is
the bundled table-backed answerer.
"""

from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, Protocol, Tuple

from legality.creature import Creature, EncounterTemplate, EvolutionChains
from legality.learn_groups import LearnGroup, group_for_generation

logger = logging.getLogger(__name__)


class MoveLearnabilityOracle(Protocol):
    def can_know_move(
        self,
        encounter: EncounterTemplate,
        move: int,
        evo_chains: EvolutionChains,
        creature: Creature,
        group: LearnGroup,
    ) -> bool:
        ...


class LearnsetOracle:
    """
    Answers learnability from registered (group, species) → moves tables.

    A move counts as knowable when the encounter delivers it, or when any
    species of the lineage can learn it in the group of a generation the
    creature existed in. The generation the creature currently lives in
    uses the resolved current group instead of the mainline one.
    """

    def __init__(self) -> None:
        self._learnsets: Dict[Tuple[LearnGroup, int], FrozenSet[int]] = {}

    def add_learnset(self, group: LearnGroup, species: int, moves: Iterable[int]) -> None:
        if not isinstance(group, LearnGroup):
            raise ValueError(f"Unknown learn group: {group!r}")
        key = (group, int(species))
        self._learnsets[key] = self._learnsets.get(key, frozenset()) | frozenset(moves)

    def learnset(self, group: LearnGroup, species: int) -> FrozenSet[int]:
        return self._learnsets.get((group, species), frozenset())

    def can_learn(self, group: LearnGroup, species: int, move: int) -> bool:
        return move in self.learnset(group, species)

    def can_know_move(
        self,
        encounter: EncounterTemplate,
        move: int,
        evo_chains: EvolutionChains,
        creature: Creature,
        group: LearnGroup,
    ) -> bool:
        if encounter.has_move(move):
            return True

        for generation, chain in evo_chains:
            gen_group = group if generation == group.generation else group_for_generation(generation)
            for evo in chain:
                if self.can_learn(gen_group, evo.species, move):
                    return True

        logger.debug("Move %d not learnable by #%d's lineage (group=%s)",
                     move, creature.species, group.value)
        return False
