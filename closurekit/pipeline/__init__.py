"""Pipeline — чистые higher-order трансформации и их цепочки.

- transforms: apply / filter_seq / fold / compose / compose_many
- pipeline: immutable Pipeline из map/filter стадий
"""

from .pipeline import (
    Pipeline,
    PipelineResult,
    PipelineStage,
    StageKind,
)
from .transforms import (
    apply,
    compose,
    compose_many,
    filter_seq,
    fold,
)

__all__ = [
    "Pipeline",
    "PipelineResult",
    "PipelineStage",
    "StageKind",
    "apply",
    "compose",
    "compose_many",
    "filter_seq",
    "fold",
]
