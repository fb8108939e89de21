"""
Global configuration for the evolution legality checks.
All constants and tunable parameters live here.
"""

# ── Moveset ──────────────────────────────────────────────────────────────────
MOVESET_SIZE = 4

# ── Formats (generation of the game the data currently lives in) ─────────────
# Level-up-while-knowing-a-move evolutions were introduced in Gen 4
# (Aipom, Yanma, Tangela, Lickitung, Piloswine, Mime Jr., Bonsly).
MOVE_EVOLUTION_MIN_FORMAT = 4
EARLIEST_FORMAT = 1
LATEST_FORMAT = 9

# ── Game Contexts ────────────────────────────────────────────────────────────
# Side-series games that ship their own learnsets instead of the mainline
# generation's.
class GameContext:
    LGPE = "lgpe"   # Let's Go Pikachu / Eevee
    BDSP = "bdsp"   # Brilliant Diamond / Shining Pearl
    PLA = "pla"     # Legends: Arceus
