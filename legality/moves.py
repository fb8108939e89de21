"""
moves – Move index numbers used by the legality checks.

Values match the games' internal move ids (shared by every generation
that has the move).
"""

from enum import IntEnum


class Move(IntEnum):
    NONE = 0
    STOMP = 23
    TACKLE = 33
    GROWL = 45
    QUICK_ATTACK = 98
    MIMIC = 102
    CHARM = 204
    ROLLOUT = 205
    ANCIENT_POWER = 246
    TAUNT = 269
    DOUBLE_HIT = 458
    BABY_DOLL_EYES = 608
    PSYSHIELD_BASH = 828
    BARB_BARRAGE = 839
    HYPER_DRILL = 887
    TWIN_BEAM = 888
    RAGE_FIST = 889


# In-game display names where they differ from the enum name.
_DISPLAY_NAMES = {
    Move.BABY_DOLL_EYES: "Baby-Doll Eyes",
}


def move_name(move: int) -> str:
    """Display name of a move id, e.g. 458 → "Double Hit"."""
    if move in _DISPLAY_NAMES:
        return _DISPLAY_NAMES[move]
    try:
        return Move(move).name.replace("_", " ").title()
    except ValueError:
        return f"move {move}"
