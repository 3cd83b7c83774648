# phasebal/domain/circuit.py
"""Описание электрической цепи (circuit) и её нагрузок по фазам.

Цепь задаётся тремя величинами:
* **name** – отображаемое имя, уникальное в пределах щита;
* **total_load** – суммарная нагрузка, Вт (целое, ≥ 0);
* **phase_count** – сколько фаз (1, 2 или 3) использует цепь.

Производное поле ``phase_shares`` рассчитывается *один раз* при
создании: ``phase_count`` одинаковых долей ``total_load // phase_count``.
Остаток от целочисленного деления **отбрасывается** (например, 5001 Вт
на двух фазах дают 2500 + 2500), так ведёт себя эталонный расчёт, и
суммы по фазам должны с ним совпадать.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Tuple

from ..constants import VALID_PHASE_COUNTS
from .errors import InvalidConfiguration

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Circuit:
    """Неизменяемая цепь щита с предрассчитанными долями по фазам."""

    name: str
    total_load: int        # Вт
    phase_count: int       # 1 – моно, 2 – би, 3 – трёхфазная
    phase_shares: Tuple[int, ...] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        # bool – подкласс int, но как нагрузка/число фаз не имеет смысла
        if not isinstance(self.phase_count, int) or isinstance(self.phase_count, bool):
            raise InvalidConfiguration(
                f"Circuit '{self.name}': phase_count must be an integer, "
                f"got {self.phase_count!r}"
            )
        if self.phase_count not in VALID_PHASE_COUNTS:
            raise InvalidConfiguration(
                f"Circuit '{self.name}': phase_count must be one of "
                f"{VALID_PHASE_COUNTS}, got {self.phase_count}"
            )
        if not isinstance(self.total_load, int) or isinstance(self.total_load, bool):
            raise InvalidConfiguration(
                f"Circuit '{self.name}': total_load must be an integer number "
                f"of watts, got {self.total_load!r}"
            )
        if self.total_load < 0:
            raise InvalidConfiguration(
                f"Circuit '{self.name}': total_load must be >= 0, got {self.total_load}"
            )

        share, remainder = divmod(self.total_load, self.phase_count)
        if remainder:
            logger.warning(
                "Circuit '%s': %d W not divisible by %d phases, %d W dropped",
                self.name,
                self.total_load,
                self.phase_count,
                remainder,
            )
        # frozen dataclass: единственная запись производного поля
        object.__setattr__(self, "phase_shares", (share,) * self.phase_count)

    @property
    def distributed_load(self) -> int:
        """Нагрузка, реально разложенная по фазам (сумма долей)."""
        return sum(self.phase_shares)
