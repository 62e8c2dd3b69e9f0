"""
Realization guard for operators that buffer an entire source.
"""

import logging
from typing import Iterable, Iterator, List, Optional, TypeVar

from lazyseq.config import config
from lazyseq.core.probes import get_iterator
from lazyseq.memory.handlers import LimitHandler, LoggingHandler
from lazyseq.memory.monitor import MemoryMonitor

T = TypeVar('T')

logger = logging.getLogger(__name__)

_monitor: Optional[MemoryMonitor] = None


def get_monitor() -> MemoryMonitor:
    """Shared monitor with the default logging and limit handlers."""
    global _monitor
    if _monitor is None:
        _monitor = MemoryMonitor()
        _monitor.add_handler(LoggingHandler())
        _monitor.add_handler(LimitHandler())
    return _monitor


def set_monitor(monitor: Optional[MemoryMonitor]) -> None:
    """Replace the shared monitor (None restores the default on next use)."""
    global _monitor
    _monitor = monitor


def guarded(source: Iterable[T], monitor: Optional[MemoryMonitor] = None) -> Iterator[T]:
    """Yield ``source`` unchanged, checking memory every few realized items."""
    iterator = get_iterator(source)
    if not config.memory_guard:
        yield from iterator
        return

    monitor = monitor or get_monitor()
    interval = config.guard_check_interval
    seen = 0
    for item in iterator:
        seen += 1
        if seen % interval == 0:
            logger.debug("realized %d items, checking memory", seen)
            monitor.check_memory_pressure()
        yield item


def realize(source: Iterable[T]) -> List[T]:
    """Fully realize ``source`` into a list under the guard."""
    return list(guarded(source))
