"""
Core math modules для closurekit

Целочисленные валидаторы с доменной проверкой.
"""

from closurekit.core.math.validators import (
    # Error messages
    FACTORIAL_NEGATIVE_MSG,
    POWER_NEGATIVE_EXPONENT_MSG,
    PRIME_BELOW_MIN_MSG,
    PRIME_MIN_INPUT,
    # Exceptions
    DomainError,
    # Functions
    factorial,
    is_prime,
    power,
)

__all__ = [
    # Validators — Constants
    "FACTORIAL_NEGATIVE_MSG",
    "POWER_NEGATIVE_EXPONENT_MSG",
    "PRIME_BELOW_MIN_MSG",
    "PRIME_MIN_INPUT",
    # Validators — Exceptions
    "DomainError",
    # Validators — Functions
    "factorial",
    "is_prime",
    "power",
]
