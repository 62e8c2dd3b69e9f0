"""
Configuration management for lazyseq.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Optional

import psutil

logger = logging.getLogger(__name__)


def _default_memory_limit() -> int:
    return int(psutil.virtual_memory().total * 0.8)


def _check_interval(value: int) -> None:
    if value <= 0:
        raise ValueError(f"guard_check_interval must be > 0, got {value}")


@dataclass
class LazySeqConfig:
    """Global configuration for lazyseq operators."""

    # Memory guard for operators that realize a whole source
    memory_limit: int = field(default_factory=_default_memory_limit)
    memory_guard: bool = True
    guard_check_interval: int = 10_000  # realized items between checks
    raise_on_memory_limit: bool = True

    _instance: Optional['LazySeqConfig'] = None

    def __post_init__(self):
        _check_interval(self.guard_check_interval)

    @classmethod
    def get_instance(cls) -> 'LazySeqConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        for key, value in kwargs.items():
            if not hasattr(instance, key) or key.startswith('_'):
                raise AttributeError(f"Unknown configuration option: {key}")
            if key == "guard_check_interval":
                _check_interval(value)
            setattr(instance, key, value)
        if kwargs:
            logger.debug("lazyseq configuration updated: %s", kwargs)

    @classmethod
    def reset(cls) -> None:
        """Restore every option of the shared instance to its default."""
        instance = cls.get_instance()
        fresh = cls()
        for f in fields(cls):
            if not f.name.startswith('_'):
                setattr(instance, f.name, getattr(fresh, f.name))


# Global configuration instance
config = LazySeqConfig.get_instance()
