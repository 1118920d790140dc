# src/bottlesort/ui/hud.py
from ..engine.state import PuzzleState


def status_text(state: PuzzleState) -> str:
    """One-line level/score readout shared by the window caption and the CLI tools."""
    return f"Level {state.level}  Score {state.score}"
