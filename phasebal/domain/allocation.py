# phasebal/domain/allocation.py
"""Результат распределения цепей по фазам R, S, T.

Модель заменяет «плотную» таблицу исходной программы (строка на цепь,
пустые фазы = 0) типизированными объектами:

* **AllocationRow** – доли одной цепи по трём фазам;
* **PhaseTotals** – итоговые суммы по фазам (именованные R, S, T);
* **AllocationResult** – строки в порядке обработки + итоги + амплитуда,
  а также журнал каждой фазы (``phase_entries``) с явными нулями.

Объекты неизменяемы; представления (консоль, графики) только читают
их, не пересчитывая нагрузки.  Для табличного вывода есть
``AllocationResult.to_frame``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Mapping, Tuple

import pandas as pd

from ..constants import PHASES, TOTALS_LABEL
from .circuit import Circuit


@dataclass(frozen=True, slots=True)
class PhaseTotals:
    """Суммарная нагрузка (Вт) по каждой фазе."""

    R: int = 0
    S: int = 0
    T: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"R": self.R, "S": self.S, "T": self.T}

    def __iter__(self) -> Iterator[int]:
        return iter((self.R, self.S, self.T))

    @property
    def amplitude(self) -> int:
        """Разброс между самой загруженной и самой свободной фазой."""
        values = tuple(self)
        return max(values) - min(values)


@dataclass(frozen=True, slots=True)
class AllocationRow:
    """Одна строка таблицы: цепь и её доли на фазах R, S, T."""

    name: str
    circuit: Circuit
    R: int
    S: int
    T: int

    @property
    def shares(self) -> Tuple[int, int, int]:
        return (self.R, self.S, self.T)

    def share(self, phase: str) -> int:
        if phase not in PHASES:
            raise KeyError(phase)
        return getattr(self, phase)


@dataclass(frozen=True, slots=True)
class AllocationResult:
    """Итог одного прогона жадного распределения."""

    strategy: str
    rows: Tuple[AllocationRow, ...]
    phase_totals: PhaseTotals
    # журнал каждой фазы: (имя цепи, доля) в порядке обработки, с нулями
    phase_entries: Mapping[str, Tuple[Tuple[str, int], ...]] = field(default_factory=dict, hash=False)

    @property
    def amplitude(self) -> int:
        return self.phase_totals.amplitude

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[AllocationRow]:
        return iter(self.rows)

    def shares_of(self, name: str) -> Tuple[int, int, int]:
        """Доли (R, S, T) цепи с именем *name*."""
        for row in self.rows:
            if row.name == name:
                return row.shares
        raise KeyError(f"Circuit '{name}' is not part of this allocation")

    def to_frame(self, with_totals: bool = False) -> pd.DataFrame:
        """Таблица «Circuit | R | S | T», опционально со строкой итогов."""
        records = [
            {"Circuit": row.name, "R": row.R, "S": row.S, "T": row.T}
            for row in self.rows
        ]
        if with_totals:
            records.append({"Circuit": TOTALS_LABEL, **self.phase_totals.as_dict()})
        return pd.DataFrame.from_records(records, columns=["Circuit", *PHASES])
