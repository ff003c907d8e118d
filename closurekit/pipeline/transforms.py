"""
Transforms — чистые higher-order операции над последовательностями int

- apply(seq, op): новый список, op применён к каждому элементу
- filter_seq(seq, pred): новый список элементов, для которых pred истинен
- fold(seq, initial, op): left-to-right reduction в скаляр
- compose(f, g): h(x) = f(g(x)), g применяется первой
- compose_many(*fns): композиция справа налево любого числа функций

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная последовательность никогда не мутируется
2. apply/filter_seq всегда возвращают новый list (пустой, но не None)
3. Порядок элементов сохраняется
4. Собственных ошибок нет; исключения из op/pred пропагируют как есть
"""

from functools import reduce
from typing import Callable, Sequence

UnaryOp = Callable[[int], int]
Predicate = Callable[[int], bool]
BinaryOp = Callable[[int, int], int]


# =============================================================================
# MAP / FILTER / FOLD
# =============================================================================


def apply(seq: Sequence[int], op: UnaryOp) -> list[int]:
    """
    Применение op к каждому элементу.

    Args:
        seq: Исходная последовательность (не изменяется)
        op: Унарная функция

    Returns:
        Новый список той же длины: result[i] == op(seq[i])

    Examples:
        >>> apply([1, 2, 3], lambda x: x * x)
        [1, 4, 9]
        >>> apply([], lambda x: x)
        []
    """
    return [op(n) for n in seq]


def filter_seq(seq: Sequence[int], pred: Predicate) -> list[int]:
    """
    Отбор элементов по предикату с сохранением порядка.

    Examples:
        >>> filter_seq([1, 2, 3, 4], lambda x: x % 2 == 0)
        [2, 4]
        >>> filter_seq([1, 3], lambda x: x % 2 == 0)
        []
    """
    return [n for n in seq if pred(n)]


def fold(seq: Sequence[int], initial: int, op: BinaryOp) -> int:
    """
    Свёртка слева направо: op(...op(op(initial, seq[0]), seq[1])..., seq[-1]).

    Args:
        seq: Исходная последовательность
        initial: Начальное значение аккумулятора
        op: op(accumulator, current) -> новый accumulator

    Returns:
        Итоговый аккумулятор; для пустой seq это initial

    Examples:
        >>> fold([1, 2, 3, 4], 0, lambda acc, cur: acc + cur)
        10
        >>> fold([], 7, lambda acc, cur: acc * cur)
        7
    """
    acc = initial
    for n in seq:
        acc = op(acc, n)
    return acc


# =============================================================================
# COMPOSITION
# =============================================================================


def compose(f: UnaryOp, g: UnaryOp) -> UnaryOp:
    """
    Композиция h(x) = f(g(x)). Порядок аргументов значим: g внутренняя.

    Examples:
        >>> h = compose(lambda x: x + 10, lambda x: x * 2)
        >>> h(5)
        20
    """

    def composed(x: int) -> int:
        return f(g(x))

    return composed


def _identity(x: int) -> int:
    return x


def compose_many(*fns: UnaryOp) -> UnaryOp:
    """
    Композиция справа налево: compose_many(f, g, h)(x) == f(g(h(x))).

    Без аргументов возвращает identity.
    """
    return reduce(compose, fns, _identity)
