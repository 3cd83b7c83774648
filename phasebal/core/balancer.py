# phasebal/core/balancer.py
"""Выбор наилучшего распределения среди нескольких стратегий.

* Принимает на вход щит (``Panel``) или просто список цепей.
* Для **каждой** стратегии упорядочивания (по умолчанию четыре:
  as_given, descending, ascending, randomized) запускает жадный
  ``PhaseAssigner`` на свежих накопителях.
* Оценивает каждый результат по *амплитуде* (max − min по фазам) и
  выбирает результат с минимальной амплитудой; при равенстве побеждает
  стратегия, стоящая раньше в списке.

Все результаты вычисляются всегда, даже если сохраняется только один:
это перебор по эвристикам, а не поиск, выбранный вариант дальше не
улучшается.  Повторный вызов пересчитывает всё с нуля.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

import numpy as np
import pandas as pd

from .phase_assigner import PhaseAssigner
from ..constants import DEFAULT_STRATEGY_ORDER, PHASES
from ..domain.allocation import AllocationResult
from ..domain.circuit import Circuit
from ..domain.panel import Panel
from ..strategies import AbstractOrderingStrategy, get as get_strategy

logger = logging.getLogger(__name__)


class Balancer:
    """Перебор стратегий упорядочивания + выбор минимальной амплитуды."""

    def __init__(
        self,
        strategies: Iterable[AbstractOrderingStrategy | str] = DEFAULT_STRATEGY_ORDER,
        assigner: PhaseAssigner | None = None,
    ) -> None:
        # Позволяем передавать либо строки‑алиасы, либо готовые объекты
        self.strategies: List[AbstractOrderingStrategy] = [
            get_strategy(s) if isinstance(s, str) else s for s in strategies
        ]
        if not self.strategies:
            raise ValueError("Balancer needs at least one ordering strategy.")
        self.assigner = assigner or PhaseAssigner()
        # результаты последнего balance(): по ним строится сводная таблица
        self.last_results: List[AllocationResult] = []

    # ------------------------------------------------------------------
    # Прогон всех стратегий
    # ------------------------------------------------------------------

    def evaluate(self, circuits: Sequence[Circuit]) -> List[AllocationResult]:
        """Результаты всех стратегий в фиксированном порядке."""
        results = []
        for strategy in self.strategies:
            ordered = strategy.order(circuits)
            result = self.assigner.assign(ordered, strategy=strategy.name)
            logger.debug(
                "strategy=%s totals=%s amplitude=%d",
                strategy.name,
                result.phase_totals.as_dict(),
                result.amplitude,
            )
            results.append(result)
        return results

    @staticmethod
    def select(results: Sequence[AllocationResult]) -> AllocationResult:
        """Результат с минимальной амплитудой (первый при равенстве)."""
        if not results:
            raise ValueError("No allocation results to choose from.")
        amplitudes = np.array([r.amplitude for r in results])
        return results[int(np.argmin(amplitudes))]

    # ------------------------------------------------------------------
    # Главная точка входа
    # ------------------------------------------------------------------

    def balance(self, panel: Panel) -> Panel:
        """Сбалансировать щит: записать лучший результат в ``panel.result``."""
        logger.info(
            "Balancing panel '%s' (%d circuits) …", panel.name, len(panel.circuits)
        )
        results = self.evaluate(panel.circuits)
        best = self.select(results)
        self.last_results = results
        panel.result = best
        logger.info(
            "Panel '%s': selected strategy '%s', totals %s, amplitude %d W",
            panel.name,
            best.strategy,
            best.phase_totals.as_dict(),
            best.amplitude,
        )
        return panel

    def compare(self, circuits: Sequence[Circuit]) -> pd.DataFrame:
        """Сводная таблица по стратегиям для нового прогона *circuits*."""
        results = self.evaluate(circuits)
        return self.results_frame(results, self.select(results))

    @staticmethod
    def results_frame(
        results: Sequence[AllocationResult], selected: AllocationResult | None
    ) -> pd.DataFrame:
        """Итоги фаз и амплитуда каждой стратегии; ``Selected`` – это *selected*."""
        records = [
            {
                "Strategy": r.strategy,
                **r.phase_totals.as_dict(),
                "Amplitude": r.amplitude,
                "Selected": r is selected,
            }
            for r in results
        ]
        return pd.DataFrame.from_records(
            records, columns=["Strategy", *PHASES, "Amplitude", "Selected"]
        )
