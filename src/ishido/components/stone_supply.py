from dataclasses import dataclass, field
from typing import List, Optional

from ishido.components.stone import Stone


@dataclass(slots=True)
class StoneSupply:
    """Undrawn stones; the end of ``stack`` is the top of the pile."""
    stack: List[Stone] = field(default_factory=list)

    def draw(self) -> Optional[Stone]:
        if not self.stack:
            return None
        return self.stack.pop()

    def __len__(self) -> int:
        return len(self.stack)
