"""
Closure Factory — фабрика вызываемых объектов с приватным состоянием

Каждый вызов фабрики создаёт НОВОЕ состояние, принадлежащее только
возвращённым callable:
- make_counter(start): nullary callable, инкрементирует и возвращает счётчик
- make_multiplier(factor): чистая функция x * factor (без состояния)
- make_accumulator(initial): тройка (add, subtract, get) над одним общим int

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экземпляры от разных вызовов фабрики никогда не видят состояние друг друга
2. Три handle одного accumulator работают с ОДНИМ и тем же значением
3. Каждый вызов видит кумулятивный эффект всех предыдущих вызовов группы
4. Входы не валидируются, ошибок нет
"""

from dataclasses import dataclass
from typing import Callable, NamedTuple


# =============================================================================
# COUNTER
# =============================================================================


def make_counter(start: int) -> Callable[[], int]:
    """
    Счётчик с собственным состоянием.

    Args:
        start: Начальное значение (первый вызов вернёт start + 1)

    Returns:
        Callable без аргументов: инкремент на 1 и возврат нового значения

    Examples:
        >>> counter = make_counter(10)
        >>> counter()
        11
        >>> counter()
        12
    """
    count = start

    def counter() -> int:
        nonlocal count
        count += 1
        return count

    return counter


# =============================================================================
# MULTIPLIER
# =============================================================================


def make_multiplier(factor: int) -> Callable[[int], int]:
    """
    Чистый множитель: factor захвачен при создании и не меняется.

    Examples:
        >>> triple = make_multiplier(3)
        >>> triple(7)
        21
    """

    def multiplier(x: int) -> int:
        return x * factor

    return multiplier


# =============================================================================
# ACCUMULATOR
# =============================================================================


@dataclass
class Accumulator:
    """
    Владелец общего значения для группы handle (add/subtract/get).

    Не frozen: bound methods одного экземпляра разделяют value.
    """

    value: int = 0

    def add(self, x: int) -> None:
        self.value += x

    def subtract(self, x: int) -> None:
        self.value -= x

    def get(self) -> int:
        return self.value


class AccumulatorHandles(NamedTuple):
    """Три callable над одним Accumulator. Распаковывается как кортеж."""

    add: Callable[[int], None]
    subtract: Callable[[int], None]
    get: Callable[[], int]


def make_accumulator(initial: int) -> AccumulatorHandles:
    """
    Accumulator: три функции над одним общим значением.

    Args:
        initial: Начальное значение

    Returns:
        AccumulatorHandles(add, subtract, get)

    Examples:
        >>> add, subtract, get = make_accumulator(100)
        >>> add(50)
        >>> subtract(30)
        >>> get()
        120
    """
    state = Accumulator(value=initial)
    return AccumulatorHandles(add=state.add, subtract=state.subtract, get=state.get)
