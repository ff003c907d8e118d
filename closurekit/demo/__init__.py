"""Demo — последовательный прогон всех частей closurekit."""

from .config import (
    ClosureDemoConfig,
    DemoConfig,
    PipelineDemoConfig,
    ValidatorDemoConfig,
)
from .driver import (
    main,
    run_closures,
    run_demo,
    run_pipeline,
    run_validators,
)

__all__ = [
    "ClosureDemoConfig",
    "DemoConfig",
    "PipelineDemoConfig",
    "ValidatorDemoConfig",
    "main",
    "run_closures",
    "run_demo",
    "run_pipeline",
    "run_validators",
]
