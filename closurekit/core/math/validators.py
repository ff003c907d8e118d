"""
Validators — Целочисленные примитивы с доменной проверкой

Модуль содержит чистые функции над int с явной проверкой области определения:
- factorial(n): n! для n >= 0
- is_prime(n): проверка простоты trial division для n >= 2
- power(base, exponent): base^exponent для exponent >= 0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Выход за domain → DomainError (никогда не silent default)
2. Все функции детерминированы и не имеют побочных эффектов
3. int в Python неограничен: переполнения (wrap/saturate) не бывает
"""

import math
from typing import Final

# =============================================================================
# СООБЩЕНИЯ ОБ ОШИБКАХ
# =============================================================================

FACTORIAL_NEGATIVE_MSG: Final[str] = "factorial is not defined for negative numbers"
PRIME_BELOW_MIN_MSG: Final[str] = "prime check requires number >= 2"
POWER_NEGATIVE_EXPONENT_MSG: Final[str] = "negative exponents not supported"

# Наименьшее число, для которого определена проверка простоты
PRIME_MIN_INPUT: Final[int] = 2


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainError(ValueError):
    """
    Аргумент вне области определения функции.

    Поднимается только валидаторами этого модуля:
    - factorial: n < 0
    - is_prime: n < 2
    - power: exponent < 0

    Вызывающий код сам решает: пропустить, залогировать или прервать.
    """
    pass


# =============================================================================
# FACTORIAL
# =============================================================================


def factorial(n: int) -> int:
    """
    Факториал n!.

    Args:
        n: Неотрицательное целое

    Returns:
        n! (0! == 1! == 1)

    Raises:
        DomainError: если n < 0

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
        >>> factorial(-1)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        DomainError: factorial is not defined for negative numbers
    """
    if n < 0:
        raise DomainError(FACTORIAL_NEGATIVE_MSG)

    result = 1
    for i in range(2, n + 1):
        result *= i

    return result


# =============================================================================
# PRIMALITY
# =============================================================================


def is_prime(n: int) -> bool:
    """
    Проверка простоты trial division до floor(sqrt(n)).

    Чётные числа > 2 отсекаются сразу, дальше проверяются только нечётные делители.

    Args:
        n: Целое >= 2

    Returns:
        True если n простое

    Raises:
        DomainError: если n < 2

    Examples:
        >>> is_prime(2)
        True
        >>> is_prime(25)
        False
    """
    if n < PRIME_MIN_INPUT:
        raise DomainError(PRIME_BELOW_MIN_MSG)

    if n == 2:
        return True

    if n % 2 == 0:
        return False

    limit = math.isqrt(n)
    for i in range(3, limit + 1, 2):
        if n % i == 0:
            return False

    return True


# =============================================================================
# POWER
# =============================================================================


def power(base: int, exponent: int) -> int:
    """
    Целочисленное возведение в степень повторным умножением.

    Args:
        base: Основание (любое int)
        exponent: Неотрицательный показатель

    Returns:
        base^exponent; при exponent == 0 всегда 1 (включая 0^0)

    Raises:
        DomainError: если exponent < 0

    Examples:
        >>> power(2, 8)
        256
        >>> power(0, 0)
        1
    """
    if exponent < 0:
        raise DomainError(POWER_NEGATIVE_EXPONENT_MSG)

    result = 1
    for _ in range(exponent):
        result *= base

    return result
