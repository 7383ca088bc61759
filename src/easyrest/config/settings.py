# easyrest/config/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Sequence

from dotenv import load_dotenv

from easyrest.config.default import DEFAULT_LOG_LEVEL, DEFAULT_TIMEOUT

load_dotenv()

# EASYREST_LOG_LEVEL from env (or .env), else the default
log_level: str = os.getenv("EASYREST_LOG_LEVEL", DEFAULT_LOG_LEVEL)


def _resolve_level(level: str | int) -> int | None:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else None


def configure_logging(level: str | int = log_level) -> None:
    logger = logging.getLogger("easyrest")
    resolved = _resolve_level(level)
    logger.setLevel(DEFAULT_LOG_LEVEL if resolved is None else resolved)
    if not logger.handlers:
        # stderr, so stdout only ever carries the result line
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if resolved is None:
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")


@dataclass(frozen=True)
class AuthConfig:
    basic: str | None = None
    """Raw ``user:pass`` credential, sent base64 encoded."""

    cookie: str | None = None
    """Raw cookie string, sent verbatim."""

    def __post_init__(self):
        # an empty flag value means "not given"
        if not self.basic:
            object.__setattr__(self, "basic", None)
        if not self.cookie:
            object.__setattr__(self, "cookie", None)


@dataclass(frozen=True)
class ClientSettings:
    headers: tuple[str, ...] = ()
    auth: AuthConfig = field(default_factory=AuthConfig)
    timeout: float = DEFAULT_TIMEOUT
    log_level: str | int = log_level

    def __post_init__(self):
        if isinstance(self.auth, dict):
            object.__setattr__(self, "auth", AuthConfig(**self.auth))
        if not isinstance(self.headers, tuple):
            object.__setattr__(self, "headers", tuple(self.headers))

    @classmethod
    def coerce(cls, settings: ClientSettings | dict | None) -> ClientSettings:
        if settings is None:
            return cls()
        if isinstance(settings, ClientSettings):
            return settings
        if isinstance(settings, dict):
            return cls(**settings)
        raise TypeError("settings must be ClientSettings | dict | None")

    @classmethod
    def from_flags(
        cls,
        headers: Sequence[str] | None = None,
        basic: str | None = None,
        cookie: str | None = None,
        **kwargs: Any,
    ) -> ClientSettings:
        return cls(
            headers=tuple(headers or ()),
            auth=AuthConfig(basic=basic, cookie=cookie),
            **kwargs,
        )
