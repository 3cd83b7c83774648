# phasebal/facade/analyzer.py
"""Высокоуровневый *facade* для балансировки щита и вывода результатов.

Класс **PanelAnalyzer** инкапсулирует последовательность вызовов:
1. Прогон всех стратегий упорядочивания и выбор лучшей (Balancer).
2. Табличное представление результата (pandas) со строкой итогов.
3. (опц.) Визуализация через модуль *visualization.plots*.

Клиентскому коду достаточно создать один объект **PanelAnalyzer** и
вызвать ``balance`` – всё остальное делается «под капотом».
"""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from ..core.balancer import Balancer
from ..constants import DEFAULT_STRATEGY_ORDER
from ..domain.allocation import AllocationResult
from ..domain.panel import Panel
from ..strategies import AbstractOrderingStrategy
from ..visualization import plots


class PanelAnalyzer:
    """Единая точка входа для внешних пользователей библиотеки."""

    # ------------------------------------------------------------------
    # Конструктор
    # ------------------------------------------------------------------

    def __init__(
        self,
        panel: Panel,
        strategies: Iterable[AbstractOrderingStrategy | str] = DEFAULT_STRATEGY_ORDER,
    ) -> None:
        self.panel = panel
        self.balancer = Balancer(strategies)

    # ------------------------------------------------------------------
    # Основные публичные методы
    # ------------------------------------------------------------------

    def balance(self) -> AllocationResult:
        """Сбалансировать щит и вернуть выбранный результат."""
        self.balancer.balance(self.panel)
        return self.panel.result

    def _result(self) -> AllocationResult:
        # ленивый запуск: таблицы/графики без явного balance();
        # результат, записанный чужим балансировщиком, пересчитываем
        if not any(r is self.panel.result for r in self.balancer.last_results):
            return self.balance()
        return self.panel.result

    def table(self, with_totals: bool = True) -> pd.DataFrame:
        """Таблица распределения (по умолчанию со строкой «Totals»)."""
        return self._result().to_frame(with_totals=with_totals)

    def compare(self) -> pd.DataFrame:
        """Итоги и амплитуды всех стратегий того прогона, что дал ``panel.result``."""
        selected = self._result()
        return self.balancer.results_frame(self.balancer.last_results, selected)

    # ------------------------------------------------------------------
    # Быстрые обёртки для графиков
    # ------------------------------------------------------------------

    def plot_phase_totals(self):
        """График итоговых нагрузок по фазам."""
        plots.plot_phase_totals(self._result())

    def plot_allocation(self):
        """График вклада цепей в каждую фазу."""
        plots.plot_allocation(self._result())

    def plot_strategy_amplitudes(self, df: pd.DataFrame | None = None):
        """График амплитуд по стратегиям."""
        plots.plot_strategy_amplitudes(self.compare() if df is None else df)
