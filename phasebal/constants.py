# phasebal/constants.py
"""Общие константы пакета: метки фаз, допустимое число фаз, порядок стратегий."""

from __future__ import annotations

from typing import Tuple

# Фазы питающей сети в «естественном» порядке обхода (важен для tie-break)
PHASES: Tuple[str, str, str] = ("R", "S", "T")

# Сколько фаз может занимать одна цепь: моно-, би-, трёхфазные
VALID_PHASE_COUNTS: Tuple[int, ...] = (1, 2, 3)

# Фиксированный порядок стратегий; при равной амплитуде побеждает первая
DEFAULT_STRATEGY_ORDER: Tuple[str, ...] = (
    "as_given",
    "descending",
    "ascending",
    "randomized",
)

TOTALS_LABEL = "Totals"
