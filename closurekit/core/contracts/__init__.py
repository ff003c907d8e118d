"""
Contract Validation Module

Модуль для валидации JSON контрактов closurekit.
"""

from .validators import (
    SCHEMA_DIR,
    ContractValidator,
    DemoReportValidator,
    SchemaLoader,
    get_schema_loader,
    validate_demo_report,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DemoReportValidator",
    # Functions
    "get_schema_loader",
    "validate_demo_report",
]
