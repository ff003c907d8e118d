"""Process — идентичность процесса и демонстрация aliasing."""

from .aliasing import (
    DEFAULT_NEW_VALUE,
    demonstrate_aliasing,
    mutate_in_place,
    rebind_value,
)
from .explorer import (
    ISOLATION_NOTE,
    PROCESS_HEADER,
    explore_process,
    get_memory_addresses,
    get_process_identity,
)

__all__ = [
    "DEFAULT_NEW_VALUE",
    "ISOLATION_NOTE",
    "PROCESS_HEADER",
    "demonstrate_aliasing",
    "explore_process",
    "get_memory_addresses",
    "get_process_identity",
    "mutate_in_place",
    "rebind_value",
]
