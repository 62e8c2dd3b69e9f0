"""Memory monitoring for operators that realize whole sequences."""

from lazyseq.memory.monitor import (
    MemoryMonitor,
    MemoryPressureLevel,
    MemoryInfo,
    MemoryPressureHandler,
)
from lazyseq.memory.handlers import (
    LoggingHandler,
    LimitHandler,
)
from lazyseq.memory.guard import (
    guarded,
    realize,
    get_monitor,
    set_monitor,
)

__all__ = [
    "MemoryMonitor",
    "MemoryPressureLevel",
    "MemoryInfo",
    "MemoryPressureHandler",
    "LoggingHandler",
    "LimitHandler",
    "guarded",
    "realize",
    "get_monitor",
    "set_monitor",
]
