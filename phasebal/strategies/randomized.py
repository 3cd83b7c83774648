# phasebal/strategies/randomized.py
"""Random shuffle followed by a stable descending sort by load.

The shuffle only decides the order among circuits of equal load, so the
strategy is effectively "descending by load with random tie-breaking".
The permutation source is injected, which keeps tests reproducible.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import numpy as np

from . import AbstractOrderingStrategy, load_key
from ..domain.circuit import Circuit

# n -> permutation of range(n)
PermutationProvider = Callable[[int], Sequence[int]]


def numpy_permutation(seed: Optional[int] = None) -> PermutationProvider:
    """Permutation provider backed by :func:`numpy.random.default_rng`."""
    rng = np.random.default_rng(seed)

    def _permute(n: int) -> Sequence[int]:
        return [int(i) for i in rng.permutation(n)]

    return _permute


class RandomizedStrategy(AbstractOrderingStrategy):
    """Shuffle, then stable sort by load (descending)."""

    name = "randomized"

    def __init__(
        self,
        seed: Optional[int] = None,
        permutation: Optional[PermutationProvider] = None,
    ) -> None:
        if seed is not None and permutation is not None:
            raise ValueError("Pass either 'seed' or 'permutation', not both")
        self.seed = seed
        self.permutation = permutation or numpy_permutation(seed)

    def order(self, circuits: Sequence[Circuit]) -> List[Circuit]:
        items = list(circuits)
        perm = list(self.permutation(len(items)))
        if sorted(perm) != list(range(len(items))):
            raise ValueError(
                f"Permutation provider returned {perm!r}, "
                f"not a permutation of range({len(items)})"
            )
        shuffled = [items[i] for i in perm]
        return sorted(shuffled, key=load_key, reverse=True)

    def __repr__(self) -> str:
        return f"RandomizedStrategy(seed={self.seed!r})"
