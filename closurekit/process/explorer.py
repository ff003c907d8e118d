"""Process Explorer — идентичность процесса и адреса объектов.

Процесс — запущенная программа с уникальным PID. Изоляция процессов не даёт
другим процессам читать или менять память этого процесса.

Значения зависят от окружения и не воспроизводимы между запусками.
"""

import os
from typing import Callable, Sequence

from closurekit.core.domain.process_info import (
    MemoryAddresses,
    ProcessIdentity,
    ProcessSnapshot,
)
from closurekit.logger import logger

PROCESS_HEADER = "====== Process Information ======"
ISOLATION_NOTE = (
    "Note: Other processes cannot access these addresses due to process isolation."
)


def get_process_identity() -> ProcessIdentity:
    """PID и PPID текущего процесса от ОС."""
    return ProcessIdentity(pid=os.getpid(), ppid=os.getppid())


def get_memory_addresses(data: Sequence[int]) -> MemoryAddresses:
    """Непрозрачные id() контейнера и его первого элемента.

    Args:
        data: любой индексируемый контейнер

    Returns:
        MemoryAddresses; first_element_id is None для пустого контейнера
    """
    first_id = id(data[0]) if len(data) > 0 else None
    return MemoryAddresses(container_id=id(data), first_element_id=first_id)


def explore_process(
    data: Sequence[int] = (1, 2, 3, 4, 5),
    out: Callable[[str], None] = print
) -> ProcessSnapshot:
    """Печать блока информации о процессе.

    Args:
        data: демо-контейнер, чьи адреса выводятся
        out: функция вывода строки (default: print)

    Returns:
        ProcessSnapshot с выведенными значениями
    """
    identity = get_process_identity()
    addresses = get_memory_addresses(data)
    logger.debug("Process snapshot: pid=%d ppid=%d", identity.pid, identity.ppid)

    out(PROCESS_HEADER)
    out(f"Current Process ID: {identity.pid}")
    out(f"Parent Process ID: {identity.ppid}")
    out(f"Memory address of container: {addresses.container_id:#x}")
    if addresses.first_element_id is not None:
        out(f"Memory address of first element: {addresses.first_element_id:#x}")
    out(ISOLATION_NOTE)
    out("")

    return ProcessSnapshot(identity=identity, addresses=addresses)
