"""Closures — фабрики callable с приватным состоянием."""

from .factory import (
    Accumulator,
    AccumulatorHandles,
    make_accumulator,
    make_counter,
    make_multiplier,
)

__all__ = [
    "Accumulator",
    "AccumulatorHandles",
    "make_accumulator",
    "make_counter",
    "make_multiplier",
]
