# phasebal/__init__.py
"""Пакет **phasebal** (балансировка нагрузок по фазам R, S, T).

Инициализационный модуль упрощает импорт «ключевых сущностей»
библиотеки для внешних пользователей:

--- from phasebal import PanelAnalyzer, Panel, Circuit ---

Экспортируемые объекты перечислены в ``__all__`` — это служит
*public API* пакета.
"""

from __future__ import annotations

from .facade.analyzer import PanelAnalyzer
from .core.balancer import Balancer
from .core.phase_assigner import PhaseAssigner
from .domain.circuit import Circuit
from .domain.panel import Panel
from .domain.allocation import AllocationResult
from .domain.errors import InvalidConfiguration, UnassignableCircuit

__all__ = [
    "PanelAnalyzer",  # фасад для балансировки, таблиц и графиков
    "Balancer",       # перебор стратегий + выбор минимальной амплитуды
    "PhaseAssigner",  # жадное однопроходное распределение
    "Circuit",        # цепь: нагрузка + число фаз
    "Panel",          # щит: набор цепей + выбранный результат
    "AllocationResult",
    "InvalidConfiguration",
    "UnassignableCircuit",
]
