"""Aliasing — rebind параметра vs мутация общего объекта.

Python передаёт ссылки на объекты. Перепривязка имени параметра внутри функции
не видна вызывающему; мутация объекта, на который ссылаются обе стороны, видна.
"""

from typing import Final, List

from closurekit.core.domain.process_info import AliasingResult

# Значение по умолчанию, которое функции присваивают внутри себя
DEFAULT_NEW_VALUE: Final[int] = 99


def rebind_value(x: int, new_value: int = DEFAULT_NEW_VALUE) -> int:
    """Перепривязка локального имени. Вызывающий своё значение не теряет."""
    x = new_value
    return x


def mutate_in_place(cell: List[int], new_value: int = DEFAULT_NEW_VALUE) -> None:
    """Запись в общий объект: cell[0] меняется и у вызывающего."""
    cell[0] = new_value


def demonstrate_aliasing(value: int, new_value: int = DEFAULT_NEW_VALUE) -> AliasingResult:
    """Прогон обоих случаев на одном исходном значении.

    Examples:
        >>> r = demonstrate_aliasing(10)
        >>> (r.after_rebind, r.after_mutate)
        (10, 99)
    """
    plain = value
    rebind_value(plain, new_value)

    cell = [value]
    mutate_in_place(cell, new_value)

    return AliasingResult(
        original_value=value,
        new_value=new_value,
        after_rebind=plain,
        after_mutate=cell[0]
    )
