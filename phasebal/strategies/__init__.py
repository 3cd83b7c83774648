# phasebal/strategies/__init__.py
"""Базовые абстракции и фабрика стратегий упорядочивания цепей.

*Модуль объединяет:*
1. **AbstractOrderingStrategy** — абстрактный базовый класс (ABC),
   определяющий единый интерфейс ``order`` для всех правил, которые
   готовят последовательность цепей перед жадным распределением.
2. Функцию‑фабрику **get(name)**, возвращающую экземпляр стратегии по
   строковому алиасу ("as_given", "descending", ...). Это упрощает выбор
   стратегий из конфигурации или аргументов CLI.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..domain.circuit import Circuit

# ---------------------------------------------------------------------------
# Абстрактный базовый класс стратегий
# ---------------------------------------------------------------------------


class AbstractOrderingStrategy(ABC):
    """Интерфейс любой стратегии упорядочивания.

    Метод ``order`` обязан вернуть **новый список** из тех же цепей и не
    изменять входную последовательность.
    """

    #: алиас стратегии, он же попадает в ``AllocationResult.strategy``
    name: str = ""

    @abstractmethod
    def order(self, circuits: Sequence[Circuit]) -> List[Circuit]:
        """Вернуть цепи в порядке, в котором их следует распределять."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def load_key(circuit: Circuit) -> int:
    """Ключ сортировки «по нагрузке»: сумма долей цепи по фазам."""
    return sum(circuit.phase_shares)


# ---------------------------------------------------------------------------
# Фабрика стратегий по строковому имени
# ---------------------------------------------------------------------------


def get(name: str = "as_given") -> AbstractOrderingStrategy:
    """Вернуть готовый объект‑стратегию по алиасу *name*.

    Parameters
    ----------
    name : str
        Допустимые значения:
        * ``"as_given"``   – AsGivenStrategy,
        * ``"descending"`` – DescendingStrategy,
        * ``"ascending"``  – AscendingStrategy,
        * ``"randomized"`` – RandomizedStrategy (несидированный ГСЧ).

    Raises
    ------
    ValueError
        Если передано неизвестное имя стратегии.
    """
    if name == "as_given":
        from .as_given import AsGivenStrategy

        return AsGivenStrategy()
    if name == "descending":
        from .sorted_order import DescendingStrategy

        return DescendingStrategy()
    if name == "ascending":
        from .sorted_order import AscendingStrategy

        return AscendingStrategy()
    if name == "randomized":
        from .randomized import RandomizedStrategy

        return RandomizedStrategy()

    raise ValueError(f"Unknown ordering strategy '{name}'")
