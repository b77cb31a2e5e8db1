"""Configuration for the async bridge.

The only setting with behavior attached is ``verbose``: when enabled, failures
captured by ``to`` and ``next_`` are logged. Settings can be overridden via
environment variables with the RESULTS_ prefix, e.g. RESULTS_VERBOSE=1.

A config is resolved per call: an explicit ``config=`` argument wins, then the
one scoped with ``use_config``, then the environment defaults.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from functools import lru_cache
from typing import Iterator, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class ResultsConfig(BaseSettings):
    """Library settings, read from RESULTS_* environment variables."""

    model_config = {"env_prefix": "RESULTS_", "frozen": True}

    verbose: bool = Field(default=False, description="Log captured failures")
    log_level: str = Field(default="ERROR", description="Level for failure logs")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def with_overrides(self, **kwargs: object) -> ResultsConfig:
        """Copy of this config with specific fields replaced."""
        values = self.model_dump()
        values.update(kwargs)
        return ResultsConfig(**values)  # type: ignore[arg-type]


_current: ContextVar[Optional[ResultsConfig]] = ContextVar("results_config", default=None)


@lru_cache(maxsize=1)
def default_config() -> ResultsConfig:
    """Environment defaults, read once on first use."""
    return ResultsConfig()


def current_config() -> ResultsConfig:
    """The config scoped to the running context, or the environment defaults."""
    config = _current.get()
    return config if config is not None else default_config()


def resolve_config(config: Optional[ResultsConfig] = None) -> ResultsConfig:
    return config if config is not None else current_config()


@contextmanager
def use_config(
    config: Optional[ResultsConfig] = None, **overrides: object
) -> Iterator[ResultsConfig]:
    """Scope a config to the enclosed block (and tasks created inside it).

    Usage:
        with use_config(verbose=True):
            result = await to(fetch())
    """
    scoped = resolve_config(config)
    if overrides:
        scoped = scoped.with_overrides(**overrides)
    token = _current.set(scoped)
    try:
        yield scoped
    finally:
        _current.reset(token)
