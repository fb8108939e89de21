"""
evolution_restrictions – Legality of "level up while knowing a move" evolutions.

Species such as Aipom → Ambipom or Yanma → Yanmega only evolve when they
level up while knowing a specific move. An evolved creature is legal if
it could have known that move at the time it evolved:

  - the move is still known, or
  - a move slot could have been freed by forgetting it, and the lineage
    could have learned it in the generation it evolved in.

Eevee → Sylveon is the one evolution satisfied by either of two moves
(Charm or Baby-Doll Eyes). Eevee's other evolutions are not move-gated.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional, Tuple

from legality.config import MOVE_EVOLUTION_MIN_FORMAT
from legality.creature import Creature, EvolutionContext
from legality.learn_groups import LearnGroup, current_group
from legality.learnsets import MoveLearnabilityOracle
from legality.move_sources import MoveSlot
from legality.moves import Move, move_name
from legality.species import Species

logger = logging.getLogger(__name__)

LearnGroupResolver = Callable[[Creature], LearnGroup]


# ── Move requirements ───────────────────────────────────────────────────────

class RequirementKind(str, Enum):
    NONE = "none"
    SINGLE = "single"
    MULTI_ALTERNATIVE = "multi_alternative"


@dataclass(frozen=True)
class MoveRequirement:
    """Move a pre-evolution must know to evolve, if any."""
    kind: RequirementKind
    moves: Tuple[int, ...] = ()
    target: Optional[int] = None    # Final form gated by a multi-alternative rule

    @classmethod
    def single(cls, move: int) -> MoveRequirement:
        return cls(RequirementKind.SINGLE, (move,))

    @classmethod
    def any_of(cls, moves: Iterable[int], target: int) -> MoveRequirement:
        return cls(RequirementKind.MULTI_ALTERNATIVE, tuple(moves), target)

    @property
    def move(self) -> int:
        """The required move of a SINGLE rule."""
        return self.moves[0]


NO_REQUIREMENT = MoveRequirement(RequirementKind.NONE)

# Species that evolve from a previous species knowing a move while leveling up.
EVOLUTION_MOVE_REQUIREMENTS: Mapping[int, MoveRequirement] = MappingProxyType({
    Species.EEVEE: MoveRequirement.any_of((Move.CHARM, Move.BABY_DOLL_EYES), Species.SYLVEON),
    Species.MIME_JR: MoveRequirement.single(Move.MIMIC),
    Species.BONSLY: MoveRequirement.single(Move.MIMIC),
    Species.AIPOM: MoveRequirement.single(Move.DOUBLE_HIT),
    Species.LICKITUNG: MoveRequirement.single(Move.ROLLOUT),
    Species.TANGELA: MoveRequirement.single(Move.ANCIENT_POWER),
    Species.YANMA: MoveRequirement.single(Move.ANCIENT_POWER),
    Species.PILOSWINE: MoveRequirement.single(Move.ANCIENT_POWER),
    Species.STEENEE: MoveRequirement.single(Move.STOMP),
    Species.CLOBBOPUS: MoveRequirement.single(Move.TAUNT),
    Species.STANTLER: MoveRequirement.single(Move.PSYSHIELD_BASH),
    Species.QWILFISH: MoveRequirement.single(Move.BARB_BARRAGE),
    Species.PRIMEAPE: MoveRequirement.single(Move.RAGE_FIST),
    Species.GIRAFARIG: MoveRequirement.single(Move.TWIN_BEAM),
    Species.DUNSPARCE: MoveRequirement.single(Move.HYPER_DRILL),
})


def requirement_for(species: int) -> MoveRequirement:
    return EVOLUTION_MOVE_REQUIREMENTS.get(species, NO_REQUIREMENT)


# ── Move slot heuristic ─────────────────────────────────────────────────────

def has_forgettable_slot(moves: Iterable[MoveSlot]) -> bool:
    """
    Check whether the required move could have been forgotten.

    Egg moves and inherited level-up moves are verified on their own and
    were known from hatching, so they cannot have replaced the required
    move. Any other source means a slot could have been overwritten.
    """
    return any(not slot.is_egg_source for slot in moves)


# ── Validator ───────────────────────────────────────────────────────────────

class EvolutionMoveValidator:
    """
    Checks a creature that evolved from a move-gated species.

    The learnability oracle and learn-group resolver are supplied by the
    caller; the validator holds no other state.
    """

    def __init__(self, oracle: MoveLearnabilityOracle,
                 resolver: LearnGroupResolver = current_group) -> None:
        self.oracle = oracle
        self.resolver = resolver

    def is_valid(self, creature: Creature, context: EvolutionContext) -> bool:
        """True if unnecessary to check or the evolution was valid."""
        # Known-move evolutions were introduced in Gen 4.
        if creature.format < MOVE_EVOLUTION_MIN_FORMAT:
            return True

        # Un-evolved from the original encounter.
        enc = context.encounter
        if enc.species == creature.species:
            return True

        requirement = requirement_for(enc.species)
        if requirement.kind is RequirementKind.NONE:
            return True
        if requirement.kind is RequirementKind.MULTI_ALTERNATIVE:
            if creature.species != requirement.target:
                return True
            return self.is_valid_multi(creature, context, requirement.moves)

        move = requirement.move
        if not has_forgettable_slot(context.moves):
            logger.debug("#%d from #%d: no slot could have held move %d",
                         creature.species, enc.species, move)
            return False

        if creature.has_move(move):
            return True

        group = self.resolver(creature)
        result = self.oracle.can_know_move(enc, move, context.evo_chains, creature, group)
        if not result:
            logger.debug("#%d from #%d: move %d not knowable in %s",
                         creature.species, enc.species, move, group.value)
        return result

    def is_valid_multi(self, creature: Creature, context: EvolutionContext,
                       candidate_moves: Tuple[int, ...]) -> bool:
        """Evolution satisfied by any one of several moves."""
        if not has_forgettable_slot(context.moves):
            logger.debug("#%d: no slot could have held any of %s",
                         creature.species, candidate_moves)
            return False

        for move in candidate_moves:
            if creature.has_move(move):
                return True

        group = self.resolver(creature)
        for move in candidate_moves:
            if self.oracle.can_know_move(context.encounter, move,
                                         context.evo_chains, creature, group):
                return True

        logger.debug("#%d: none of %s knowable in %s",
                     creature.species, candidate_moves, group.value)
        return False


def is_valid_evolution_with_move(creature: Creature, context: EvolutionContext,
                                 oracle: MoveLearnabilityOracle,
                                 resolver: LearnGroupResolver = current_group) -> bool:
    return EvolutionMoveValidator(oracle, resolver).is_valid(creature, context)


# ── Reporting ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class CheckResult:
    valid: bool
    message: str = ""
    identifier: str = "evolution"


def check_evolution_move(creature: Creature, context: EvolutionContext,
                         oracle: MoveLearnabilityOracle,
                         resolver: LearnGroupResolver = current_group) -> CheckResult:
    """Wrap the verdict in a result the legality pipeline can report."""
    if is_valid_evolution_with_move(creature, context, oracle, resolver):
        return CheckResult(True)

    requirement = requirement_for(context.encounter.species)
    moves = ", ".join(move_name(m) for m in requirement.moves)
    message = (f"Evolution from #{context.encounter.species} requires knowing "
               f"{moves} to evolve; unable to know it.")
    logger.info("Invalid evolution: %s (%s)", creature.summary(), message)
    return CheckResult(False, message)

