from dataclasses import dataclass


@dataclass(frozen=True)
class Rules:
    # Layers per bottle
    capacity: int = 4
    # Score added by every successful pour
    points_per_pour: int = 10
    # A second empty bottle is added when the level deals more bottles than this
    extra_empty_after: int = 3


# Global rules (can be swapped by launcher)
RULES = Rules()
