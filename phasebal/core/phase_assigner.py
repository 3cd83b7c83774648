# phasebal/core/phase_assigner.py
"""Жадное однопроходное распределение цепей по фазам R, S, T.

Алгоритм обходит цепи **ровно один раз** в заданном порядке и никогда
не пересматривает уже сделанное назначение.  Правило выбора зависит
только от числа фаз цепи:

* **3 фазы** – доли ставятся позиционно: первая на R, вторая на S,
  третья на T (без учёта текущих нагрузок);
* **2 фазы** – каждая доля по очереди уходит на наименее загруженную
  фазу из ещё *не занятых этой цепью*; оставшаяся фаза получает явный 0;
* **1 фаза** – доля уходит на наименее загруженную из трёх фаз,
  две другие получают 0.

Сравнение идёт по *текущим* суммам в момент обработки, поэтому итог
зависит от порядка цепей – для этого и существуют стратегии упорядочивания
(см. ``phasebal.strategies``).  При равных суммах выбирается первая фаза
в порядке R, S, T.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..constants import PHASES
from ..domain.allocation import AllocationResult, AllocationRow, PhaseTotals
from ..domain.circuit import Circuit
from ..domain.errors import UnassignableCircuit

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Накопитель одной фазы
# ---------------------------------------------------------------------------


@dataclass
class PhaseAccumulator:
    """Текущая сумма фазы и журнал (имя цепи, доля) в порядке назначения."""

    phase: str
    load_sum: int = 0
    entries: List[Tuple[str, int]] = field(default_factory=list)

    def add(self, circuit_name: str, share: int) -> None:
        self.entries.append((circuit_name, share))
        self.load_sum += share


def _lightest(candidates: Sequence[PhaseAccumulator]) -> PhaseAccumulator:
    # min() возвращает первый минимум, т.е. tie-break в порядке R, S, T
    return min(candidates, key=lambda acc: acc.load_sum)


# ---------------------------------------------------------------------------
# Основной класс
# ---------------------------------------------------------------------------


class PhaseAssigner:
    """Один прогон жадного распределения на свежей тройке накопителей."""

    def assign(self, circuits: Iterable[Circuit], strategy: str = "as_given") -> AllocationResult:
        """Разложить *circuits* (в данном порядке) по фазам и вернуть результат."""
        phases = [PhaseAccumulator(p) for p in PHASES]
        rows: List[AllocationRow] = []

        for circuit in circuits:
            placed = self._place(circuit, phases)
            rows.append(
                AllocationRow(
                    name=circuit.name,
                    circuit=circuit,
                    R=placed["R"],
                    S=placed["S"],
                    T=placed["T"],
                )
            )
            logger.debug(
                "%s: %-24s -> R=%d S=%d T=%d (sums %s)",
                strategy,
                circuit.name,
                placed["R"],
                placed["S"],
                placed["T"],
                [acc.load_sum for acc in phases],
            )

        totals = PhaseTotals(*(acc.load_sum for acc in phases))
        return AllocationResult(
            strategy=strategy,
            rows=tuple(rows),
            phase_totals=totals,
            phase_entries={acc.phase: tuple(acc.entries) for acc in phases},
        )

    # ------------------------------------------------------------------
    # Правила размещения по числу фаз
    # ------------------------------------------------------------------

    def _place(self, circuit: Circuit, phases: List[PhaseAccumulator]) -> Dict[str, int]:
        shares = circuit.phase_shares
        if circuit.phase_count != len(shares):
            raise UnassignableCircuit(
                f"Circuit '{circuit.name}' has {len(shares)} shares "
                f"for {circuit.phase_count} phases"
            )

        if circuit.phase_count == 3:
            for acc, share in zip(phases, shares):
                acc.add(circuit.name, share)
            return {acc.phase: share for acc, share in zip(phases, shares)}

        if circuit.phase_count == 2:
            placed: Dict[str, int] = {}
            free = list(phases)
            for share in shares:
                target = _lightest(free)
                target.add(circuit.name, share)
                placed[target.phase] = share
                free = [acc for acc in free if acc is not target]
            # единственная нетронутая фаза получает явный ноль
            for acc in free:
                acc.add(circuit.name, 0)
                placed[acc.phase] = 0
            return placed

        if circuit.phase_count == 1:
            target = _lightest(phases)
            placed = {}
            for acc in phases:
                share = shares[0] if acc is target else 0
                acc.add(circuit.name, share)
                placed[acc.phase] = share
            return placed

        raise UnassignableCircuit(
            f"Circuit '{circuit.name}' spans {circuit.phase_count} phases; "
            "only 1, 2 or 3 can be assigned"
        )
