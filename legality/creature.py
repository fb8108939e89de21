"""
creature – Read-only views handed to the legality checks.

The legality pipeline builds these once per check:
  - Creature: the record being checked (current species, format, moves)
  - EncounterTemplate: the original encounter it was matched to
  - EvoCriteria / EvolutionChains: the lineage the creature passed
    through, per generation it existed in
  - EvolutionContext: everything above bundled with the classified moveset
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from legality.config import MOVESET_SIZE
from legality.move_sources import MoveSlot


# ── Creature record ─────────────────────────────────────────────────────────

@dataclass
class Creature:
    """Current state of the creature being checked."""
    species: int
    format: int                         # Generation of the game it lives in
    moves: List[int] = field(default_factory=lambda: [0] * MOVESET_SIZE)
    context: Optional[str] = None       # Side-series game tag, see GameContext
    level: int = 1

    def has_move(self, move: int) -> bool:
        return move != 0 and move in self.moves

    def summary(self) -> str:
        ctx = f" [{self.context}]" if self.context else ""
        moves = "/".join(str(m) for m in self.moves if m)
        return f"#{self.species} Lv.{self.level} Gen{self.format}{ctx} moves:{moves or '-'}"


# ── Encounter template ──────────────────────────────────────────────────────

@dataclass(frozen=True)
class EncounterTemplate:
    """The original encounter the creature was matched against."""
    species: int
    generation: int
    version: str = ""
    moves: Tuple[int, ...] = ()         # Moves the encounter is delivered with

    def has_move(self, move: int) -> bool:
        return move != 0 and move in self.moves


# ── Evolution chains ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EvoCriteria:
    """One species in the lineage."""
    species: int


@dataclass
class EvolutionChains:
    """
    Lineage of the creature per generation it has existed in.

    Each chain is ordered current form first, original form last.
    """
    chains: Dict[int, Tuple[EvoCriteria, ...]] = field(default_factory=dict)

    def get(self, generation: int) -> Tuple[EvoCriteria, ...]:
        return self.chains.get(generation, ())

    def generations(self) -> List[int]:
        return sorted(self.chains)

    def species_in(self, generation: int) -> List[int]:
        return [evo.species for evo in self.get(generation)]

    def __iter__(self) -> Iterator[Tuple[int, Tuple[EvoCriteria, ...]]]:
        for gen in self.generations():
            yield gen, self.chains[gen]


# ── Per-check bundle ────────────────────────────────────────────────────────

@dataclass(frozen=True)
class EvolutionContext:
    """Inputs for one evolution legality check."""
    encounter: EncounterTemplate
    evo_chains: EvolutionChains
    moves: Tuple[MoveSlot, ...]
