from __future__ import annotations

from typing import List, Sequence

from . import AbstractOrderingStrategy
from ..domain.circuit import Circuit


class AsGivenStrategy(AbstractOrderingStrategy):
    """Identity ordering: the panel's insertion order."""

    name = "as_given"

    def order(self, circuits: Sequence[Circuit]) -> List[Circuit]:
        return list(circuits)
