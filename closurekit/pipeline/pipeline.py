"""Pipeline — immutable цепочка map/filter стадий над Sequence[int].

Builder-методы (map, filter) возвращают НОВЫЙ Pipeline, исходный не меняется.
run() прогоняет последовательность через все стадии по порядку и сохраняет
выход каждой стадии для диагностики.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Tuple, Union

from .transforms import BinaryOp, Predicate, UnaryOp, apply, filter_seq, fold


class StageKind(str, Enum):
    """Тип стадии pipeline."""
    MAP = "map"
    FILTER = "filter"


@dataclass(frozen=True)
class PipelineStage:
    """Одна стадия: вид операции, функция и имя для отчёта."""

    kind: StageKind
    fn: Union[UnaryOp, Predicate]
    name: str


@dataclass(frozen=True)
class PipelineResult:
    """Результат прогона pipeline."""

    input: Tuple[int, ...]
    output: Tuple[int, ...]

    # Выход каждой стадии в порядке исполнения: (stage_name, values)
    intermediates: Tuple[Tuple[str, Tuple[int, ...]], ...]


def _stage_name(fn: Callable, name: Optional[str]) -> str:
    if name:
        return name
    return getattr(fn, "__name__", repr(fn))


@dataclass(frozen=True)
class Pipeline:
    """Immutable цепочка стадий.

    Examples:
        >>> p = Pipeline().map(lambda x: x * x).filter(lambda x: x % 2 == 0)
        >>> p.run([1, 2, 3, 4]).output
        (4, 16)
    """

    stages: Tuple[PipelineStage, ...] = field(default_factory=tuple)

    def map(self, op: UnaryOp, name: Optional[str] = None) -> "Pipeline":
        """Добавить map-стадию (возвращает новый Pipeline)."""
        stage = PipelineStage(kind=StageKind.MAP, fn=op, name=_stage_name(op, name))
        return Pipeline(stages=self.stages + (stage,))

    def filter(self, pred: Predicate, name: Optional[str] = None) -> "Pipeline":
        """Добавить filter-стадию (возвращает новый Pipeline)."""
        stage = PipelineStage(kind=StageKind.FILTER, fn=pred, name=_stage_name(pred, name))
        return Pipeline(stages=self.stages + (stage,))

    def run(self, seq: Iterable[int]) -> PipelineResult:
        """Прогон seq через все стадии.

        Args:
            seq: входная последовательность или итератор (читается один раз)

        Returns:
            PipelineResult с выходом и промежуточными значениями
        """
        source = tuple(seq)
        current = list(source)
        intermediates = []

        for stage in self.stages:
            if stage.kind == StageKind.MAP:
                current = apply(current, stage.fn)
            else:
                current = filter_seq(current, stage.fn)
            intermediates.append((stage.name, tuple(current)))

        return PipelineResult(
            input=source,
            output=tuple(current),
            intermediates=tuple(intermediates)
        )

    def reduce(self, seq: Iterable[int], initial: int, op: BinaryOp) -> int:
        """Прогон seq через стадии и свёртка результата."""
        return fold(self.run(seq).output, initial, op)

    def __len__(self) -> int:
        return len(self.stages)
