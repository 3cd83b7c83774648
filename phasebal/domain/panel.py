# phasebal/domain/panel.py

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from .allocation import AllocationResult
from .circuit import Circuit
from .errors import InvalidConfiguration


@dataclass(slots=True)
class Panel:
    """Electrical panel: an ordered circuit set plus the selected allocation.

    ``result`` stays ``None`` until the panel is balanced and is replaced
    wholesale by every balancing run.
    """

    name: str
    circuits: List[Circuit] = field(default_factory=list)
    result: Optional[AllocationResult] = None

    def __post_init__(self) -> None:
        self.circuits = list(self.circuits)
        duplicates = [n for n, c in Counter(c.name for c in self.circuits).items() if c > 1]
        if duplicates:
            raise InvalidConfiguration(
                f"Panel '{self.name}': circuit names must be unique, duplicated: {duplicates}"
            )
