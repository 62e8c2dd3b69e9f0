"""Process memory monitoring and pressure detection."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

import psutil

from lazyseq.config import config

logger = logging.getLogger(__name__)


class MemoryPressureLevel(Enum):
    """Memory pressure levels."""
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __gt__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other):
        if not isinstance(other, MemoryPressureLevel):
            return NotImplemented
        return self.value >= other.value


@dataclass
class MemoryInfo:
    """Process memory usage measured against the configured limit."""
    rss: int
    limit: int
    percent: float
    pressure_level: MemoryPressureLevel
    timestamp: float

    @property
    def rss_mb(self) -> float:
        return self.rss / (1024 ** 2)

    @property
    def limit_mb(self) -> float:
        return self.limit / (1024 ** 2)

    def __str__(self) -> str:
        return (f"Memory: {self.percent:.1f}% of limit "
                f"({self.rss_mb:.1f}/{self.limit_mb:.1f} MB), "
                f"Pressure: {self.pressure_level.name}")


def pressure_for(percent: float) -> MemoryPressureLevel:
    """Map a percentage of the limit to a pressure level."""
    if percent >= 100:
        return MemoryPressureLevel.CRITICAL
    elif percent >= 85:
        return MemoryPressureLevel.HIGH
    elif percent >= 70:
        return MemoryPressureLevel.MEDIUM
    elif percent >= 50:
        return MemoryPressureLevel.LOW
    return MemoryPressureLevel.NONE


class MemoryPressureHandler(ABC):
    """Abstract base class for memory pressure handlers."""

    @abstractmethod
    def can_handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> bool:
        """Check if this handler should handle the given pressure level."""
        pass

    @abstractmethod
    def handle(self, level: MemoryPressureLevel, info: MemoryInfo) -> None:
        """Handle memory pressure."""
        pass


class MemoryMonitor:
    """Measure the current process against a memory limit."""

    def __init__(self, memory_limit: Optional[int] = None):
        """
        Initialize memory monitor.

        Args:
            memory_limit: Limit in bytes (None for ``config.memory_limit``)
        """
        self._memory_limit = memory_limit
        self.handlers: List[MemoryPressureHandler] = []
        self._process = psutil.Process()
        self._history: List[MemoryInfo] = []
        self._max_history = 100

    @property
    def memory_limit(self) -> int:
        return self._memory_limit or config.memory_limit

    def add_handler(self, handler: MemoryPressureHandler) -> None:
        """Add a memory pressure handler."""
        self.handlers.append(handler)

    def remove_handler(self, handler: MemoryPressureHandler) -> None:
        """Remove a memory pressure handler."""
        if handler in self.handlers:
            self.handlers.remove(handler)

    def get_memory_info(self) -> MemoryInfo:
        """Get current memory information."""
        rss = self._process.memory_info().rss
        limit = max(1, self.memory_limit)
        percent = (rss / limit) * 100
        return MemoryInfo(
            rss=rss,
            limit=limit,
            percent=percent,
            pressure_level=pressure_for(percent),
            timestamp=time.time()
        )

    def check_memory_pressure(self) -> MemoryPressureLevel:
        """Check current memory pressure and notify handlers.

        Handler exceptions (such as ``MemoryLimitError``) propagate to the caller.
        """
        info = self.get_memory_info()

        self._history.append(info)
        if len(self._history) > self._max_history:
            self._history.pop(0)

        logger.debug("memory check: %s", info)
        for handler in self.handlers:
            if handler.can_handle(info.pressure_level, info):
                handler.handle(info.pressure_level, info)

        return info.pressure_level

    @property
    def history(self) -> List[MemoryInfo]:
        return list(self._history)
