"""
Domain models and value objects.

Contains immutable report models for the demo run and process identity.
"""

from closurekit.core.domain.demo_report import (
    ClosureSection,
    DemoReport,
    PipelineSection,
    ValidatorOutcome,
)
from closurekit.core.domain.process_info import (
    AliasingResult,
    MemoryAddresses,
    ProcessIdentity,
    ProcessSnapshot,
)

__all__ = [
    # Process info
    "AliasingResult",
    "MemoryAddresses",
    "ProcessIdentity",
    "ProcessSnapshot",
    # Demo report
    "ClosureSection",
    "DemoReport",
    "PipelineSection",
    "ValidatorOutcome",
]
