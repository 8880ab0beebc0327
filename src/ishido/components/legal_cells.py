from dataclasses import dataclass, field
from typing import FrozenSet

from ishido.components.position import Position


@dataclass(slots=True)
class LegalCells:
    """Cells where the pending stone may currently be placed."""
    positions: FrozenSet[Position] = field(default_factory=frozenset)
