"""Конфигурация демо-прогона."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ClosureDemoConfig:
    """Входы части 2 (closures).

    - два независимых счётчика, вызовы чередуются
    - множители: double и triple
    - accumulator: initial → add → subtract
    """
    counter_a_start: int = 0
    counter_b_start: int = 10
    counter_calls: int = 3
    multiplier_factors: Tuple[int, ...] = (2, 3)
    multiplier_input: int = 5
    accumulator_initial: int = 100
    accumulator_add: int = 50
    accumulator_subtract: int = 30


@dataclass(frozen=True)
class PipelineDemoConfig:
    """Входы части 3 (higher-order функции)."""
    sequence: Tuple[int, ...] = tuple(range(1, 11))
    compose_add: int = 10      # f(x) = x + compose_add
    compose_factor: int = 2    # g(x) = x * compose_factor
    compose_input: int = 5


@dataclass(frozen=True)
class ValidatorDemoConfig:
    """Входы части 1. Отрицательные/малые значения показывают DomainError."""
    factorial_inputs: Tuple[int, ...] = (0, 5, 10, -1)
    prime_inputs: Tuple[int, ...] = (1, 2, 17, 25)
    power_inputs: Tuple[Tuple[int, int], ...] = ((2, 8), (5, 3), (7, 0), (2, -1))


@dataclass(frozen=True)
class DemoConfig:
    """Полная конфигурация run_demo()."""
    validators: ValidatorDemoConfig = field(default_factory=ValidatorDemoConfig)
    closures: ClosureDemoConfig = field(default_factory=ClosureDemoConfig)
    pipeline: PipelineDemoConfig = field(default_factory=PipelineDemoConfig)
    process_data: Tuple[int, ...] = (1, 2, 3, 4, 5)
    aliasing_value: int = 10
