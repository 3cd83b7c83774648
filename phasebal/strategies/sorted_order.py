# phasebal/strategies/sorted_order.py
"""Детерминированные сортировки: по числу фаз, затем по нагрузке.

Обе стратегии используют устойчивую сортировку Python, так что цепи с
одинаковыми (число фаз, нагрузка) сохраняют исходный взаимный порядок.
"""

from __future__ import annotations

from typing import List, Sequence

from . import AbstractOrderingStrategy, load_key
from ..domain.circuit import Circuit


class DescendingStrategy(AbstractOrderingStrategy):
    """Сначала трёхфазные и самые тяжёлые, в конце лёгкие однофазные."""

    name = "descending"

    def order(self, circuits: Sequence[Circuit]) -> List[Circuit]:
        return sorted(circuits, key=lambda c: (c.phase_count, load_key(c)), reverse=True)


class AscendingStrategy(AbstractOrderingStrategy):
    """Обратный порядок: лёгкие однофазные первыми."""

    name = "ascending"

    def order(self, circuits: Sequence[Circuit]) -> List[Circuit]:
        return sorted(circuits, key=lambda c: (c.phase_count, load_key(c)))
