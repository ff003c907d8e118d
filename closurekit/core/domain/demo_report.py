"""
DemoReport — Модель отчёта демо-прогона

Immutable Pydantic модель со всеми вычисленными значениями демо.
Совместима с JSON Schema (closurekit/core/contracts/schema/demo_report.json).
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from .process_info import AliasingResult, ProcessSnapshot


# =============================================================================
# NESTED MODELS
# =============================================================================


class ValidatorOutcome(BaseModel):
    """
    Результат одного вызова валидатора.

    Ровно одно из value / error заполнено.
    """

    name: str = Field(..., min_length=1, description="Имя функции (factorial/is_prime/power)")
    args: List[int] = Field(..., description="Аргументы вызова")
    value: Optional[int] = Field(None, description="Результат (bool хранится как 0/1)")
    error: Optional[str] = Field(None, description="Сообщение DomainError")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_value_xor_error(self) -> "ValidatorOutcome":
        """Ровно одно из value / error: либо результат, либо сообщение DomainError."""
        if (self.value is None) == (self.error is None):
            raise ValueError(
                f"exactly one of value/error must be set, "
                f"got value={self.value!r}, error={self.error!r}"
            )
        return self

    @property
    def ok(self) -> bool:
        return self.error is None


class ClosureSection(BaseModel):
    """Часть 2: closures."""

    counter_outputs: Dict[str, List[int]] = Field(
        ..., description="Выходы счётчиков по имени, в порядке вызовов"
    )
    multiplier_outputs: Dict[str, int] = Field(
        ..., description="Результаты множителей по имени"
    )
    accumulator_trace: List[int] = Field(
        ..., description="get() после каждой операции accumulator"
    )
    accumulator_final: int = Field(..., description="Итоговое значение accumulator")

    model_config = {"frozen": True}


class PipelineSection(BaseModel):
    """Часть 3: higher-order функции."""

    source: List[int] = Field(..., description="Исходная последовательность")
    squared: List[int] = Field(..., description="apply(x*x)")
    evens: List[int] = Field(..., description="filter_seq(even)")
    sum: int = Field(..., description="fold(+, 0)")
    product: int = Field(..., description="fold(*, 1)")
    composed: int = Field(..., description="compose(f, g)(compose_input)")
    chained_output: List[int] = Field(..., description="Выход Pipeline")

    model_config = {"frozen": True}


# =============================================================================
# DEMO REPORT
# =============================================================================


class DemoReport(BaseModel):
    """Полный отчёт run_demo()."""

    validators: List[ValidatorOutcome] = Field(..., description="Часть 1")
    closures: ClosureSection = Field(..., description="Часть 2")
    pipeline: PipelineSection = Field(..., description="Часть 3")
    process: ProcessSnapshot = Field(..., description="Часть 4")
    aliasing: AliasingResult = Field(..., description="Часть 4: aliasing")

    model_config = {"frozen": True}
