"""
Process Info — Модели идентичности процесса и aliasing-демо

Immutable Pydantic модели для значений, зависящих от окружения (PID, адреса
объектов). Конкретные значения не воспроизводимы между запусками и не
проверяются тестами; проверяется только форма.
"""

from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# PROCESS IDENTITY
# =============================================================================


class ProcessIdentity(BaseModel):
    """Идентификаторы текущего и родительского процесса от ОС."""

    pid: int = Field(..., ge=0, description="ID текущего процесса")
    ppid: int = Field(..., ge=0, description="ID родительского процесса")

    model_config = {"frozen": True}


class MemoryAddresses(BaseModel):
    """
    Непрозрачные идентификаторы объектов (CPython: адреса в памяти).

    container_id — сам контейнер, first_element_id — его первый элемент.
    """

    container_id: int = Field(..., description="id() контейнера")
    first_element_id: Optional[int] = Field(
        None, description="id() первого элемента (None для пустого контейнера)"
    )

    model_config = {"frozen": True}


class ProcessSnapshot(BaseModel):
    """Снапшот: идентичность процесса + адреса демо-данных."""

    identity: ProcessIdentity
    addresses: MemoryAddresses

    model_config = {"frozen": True}


# =============================================================================
# ALIASING
# =============================================================================


class AliasingResult(BaseModel):
    """
    Результат сравнения rebind vs in-place mutation.

    rebind: параметр перепривязан внутри функции → у вызывающего без изменений.
    mutate: общий объект изменён внутри функции → изменение видно вызывающему.
    """

    original_value: int = Field(..., description="Исходное значение")
    new_value: int = Field(..., description="Значение, присваиваемое внутри функций")
    after_rebind: int = Field(..., description="Значение у вызывающего после rebind")
    after_mutate: int = Field(..., description="Значение у вызывающего после mutate")

    model_config = {"frozen": True}

    @property
    def rebind_visible(self) -> bool:
        return self.after_rebind != self.original_value

    @property
    def mutation_visible(self) -> bool:
        return self.after_mutate != self.original_value
