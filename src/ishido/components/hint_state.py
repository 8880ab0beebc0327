from dataclasses import dataclass


@dataclass(slots=True)
class HintState:
    """Whether the legal-cell overlay is shown, and how long the player has idled."""
    visible: bool = False
    idle_time: float = 0.0
