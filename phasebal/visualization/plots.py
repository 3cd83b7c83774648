# phasebal/visualization/plots.py
"""Мини‑обёртки над matplotlib для отображения результатов балансировки.

Функции строят *интерактивные* графики (``plt.show()``) и не возвращают
объекты Figure/Axes, чтобы оставить API как можно более простым.
"""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from ..constants import PHASES
from ..domain.allocation import AllocationResult

# ---------------------------------------------------------------------------
# 1) Итоговые нагрузки по фазам
# ---------------------------------------------------------------------------

def plot_phase_totals(result: AllocationResult) -> None:
    """Столбцы R/S/T + линия средней нагрузки."""
    totals = list(result.phase_totals)
    plt.bar(PHASES, totals, color=["tab:red", "tab:olive", "tab:blue"])
    plt.axhline(float(np.mean(totals)), ls="--", color="black", label="Среднее")
    plt.title(
        f"Нагрузка по фазам (стратегия {result.strategy}, "
        f"амплитуда {result.amplitude} Вт)"
    )
    plt.xlabel("Фаза")
    plt.ylabel("P, Вт")
    plt.grid(True, axis="y")
    plt.legend()
    plt.show()

# ---------------------------------------------------------------------------
# 2) Вклад каждой цепи в фазы
# ---------------------------------------------------------------------------

def plot_allocation(result: AllocationResult) -> None:
    """Накопительные столбцы: доля каждой цепи на R, S, T."""
    bottom = np.zeros(len(PHASES))
    for row in result.rows:
        shares = np.array(row.shares, dtype=float)
        plt.bar(PHASES, shares, bottom=bottom, label=row.name)
        bottom += shares
    plt.title("Распределение цепей по фазам")
    plt.xlabel("Фаза")
    plt.ylabel("P, Вт")
    plt.grid(True, axis="y")
    if result.rows:
        plt.legend(fontsize="small")
    plt.show()

# ---------------------------------------------------------------------------
# 3) Сравнение стратегий
# ---------------------------------------------------------------------------

def plot_strategy_amplitudes(df: pd.DataFrame) -> None:
    """Амплитуда каждой стратегии; выбранная выделена цветом."""
    colors = ["tab:green" if sel else "tab:gray" for sel in df["Selected"]]
    plt.bar(df["Strategy"], df["Amplitude"], color=colors)
    plt.title("Амплитуда нагрузок по стратегиям")
    plt.xlabel("Стратегия")
    plt.ylabel("max − min, Вт")
    plt.grid(True, axis="y")
    plt.show()
