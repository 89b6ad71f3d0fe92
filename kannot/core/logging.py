"""
Channel-Aware Structured Logging for kannot.

Every log call goes through a channel, and a channel is shown when it is
enabled and the global level is high enough:
- DATA: annotation graph construction and reconstruction
- BRIDGE: native schema parsing and serialization
- PROC: analyzer calls
- SYSTEM: errors, warnings, status

Levels, from quiet to noisy: SILENT, INFO, VERBOSE, DEBUG.

Environment variables (read when no explicit value is given):
- KANNOT_LOG_LEVEL: silent/info/verbose/debug
- KANNOT_LOG_FORMAT: console/json
- KANNOT_LOG_CHANNELS: comma-separated channel names (all if unset)
"""

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterator, Optional, Union

import structlog


class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    INFO = 1
    VERBOSE = 2
    DEBUG = 3

    @classmethod
    def from_string(cls, s: str) -> "LogLevel":
        """Parse a level name. stdlib names and unknown names map to INFO."""
        return cls.__members__.get(s.upper(), cls.INFO)

    @property
    def stdlib_level(self) -> int:
        if self is LogLevel.SILENT:
            return logging.CRITICAL + 10
        return logging.INFO if self is LogLevel.INFO else logging.DEBUG


class LogChannel(str, Enum):
    """Semantic log channels."""
    DATA = "DATA"        # Graph construction
    BRIDGE = "BRIDGE"    # Native schema in/out
    PROC = "PROC"        # Analyzer calls
    SYSTEM = "SYSTEM"    # Errors, warnings, status

    @classmethod
    def all(cls) -> list["LogChannel"]:
        return list(cls)

    @classmethod
    def from_string(cls, s: str) -> Optional["LogChannel"]:
        return cls.__members__.get(s.strip().upper())


@dataclass
class _LogSettings:
    level: LogLevel = LogLevel.INFO
    format: str = "console"
    channels: set = field(default_factory=lambda: set(LogChannel))
    configured: bool = False


_settings = _LogSettings()

# Fields merged into every event logged inside `log_context`
_context: ContextVar[dict] = ContextVar("kannot_log_context", default={})


def _parse_channels(channels) -> list[LogChannel]:
    parsed = []
    for ch in channels:
        found = ch if isinstance(ch, LogChannel) else LogChannel.from_string(ch)
        if found is not None:
            parsed.append(found)
    return parsed


def configure_logging(
    level: Union[LogLevel, str, None] = None,
    format: str = None,
    channels: list[Union[LogChannel, str]] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog and the channel filter.

    Args:
        level: Log level (LogLevel or name); KANNOT_LOG_LEVEL if None
        format: "console" or "json"; KANNOT_LOG_FORMAT if None
        channels: Channels to show; KANNOT_LOG_CHANNELS, else all, if None
        force: Reconfigure even if already configured
    """
    if _settings.configured and not force:
        return

    if level is None:
        level = os.environ.get("KANNOT_LOG_LEVEL", "info")
    if isinstance(level, str):
        level = LogLevel.from_string(level)
    if format is None:
        format = os.environ.get("KANNOT_LOG_FORMAT", "console")
    if channels is None:
        env_channels = os.environ.get("KANNOT_LOG_CHANNELS", "")
        channels = _parse_channels(env_channels.split(",")) if env_channels else []
        channels = channels or LogChannel.all()
    else:
        channels = _parse_channels(channels)

    _settings.level = level
    _settings.format = format
    _settings.channels = set(channels)

    # stderr keeps CLI stdout clean for JSON output
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level.stdlib_level, force=True)

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _settings.configured = True


@contextmanager
def log_context(**fields) -> Iterator[dict]:
    """
    Add `fields` to every event logged inside the block, on any channel.

    Contexts nest; the inner value wins for a repeated key. Worker
    threads started with `asyncio.to_thread` inherit the context.
    """
    merged = {**_context.get(), **fields}
    token = _context.set(merged)
    try:
        yield merged
    finally:
        _context.reset(token)


def current_log_context() -> dict:
    return dict(_context.get())


class ChannelLogger:
    """
    A logger bound to one channel.

    info() and verbose() and debug() honor the level and the channel
    filter. error() and warning() are shown on every channel unless
    logging is SILENT.
    """

    def __init__(self, channel: LogChannel, name: str = None):
        self.channel = channel
        self.name = name or f"kannot.{channel.value.lower()}"
        self._logger = structlog.get_logger(self.name)

    def _should_log(self, msg_level: LogLevel) -> bool:
        return self.channel in _settings.channels and _settings.level >= msg_level

    def _make_event(self, **kwargs) -> dict:
        return {"channel": self.channel.value, **_context.get(), **kwargs}

    def info(self, event: str, **kwargs) -> None:
        if self._should_log(LogLevel.INFO):
            self._logger.info(event, **self._make_event(**kwargs))

    def verbose(self, event: str, **kwargs) -> None:
        if self._should_log(LogLevel.VERBOSE):
            self._logger.debug(event, **self._make_event(level="verbose", **kwargs))

    def debug(self, event: str, **kwargs) -> None:
        if self._should_log(LogLevel.DEBUG):
            self._logger.debug(event, **self._make_event(level="debug", **kwargs))

    def error(self, event: str, **kwargs) -> None:
        if _settings.level is not LogLevel.SILENT:
            self._logger.error(event, **self._make_event(**kwargs))

    def warning(self, event: str, **kwargs) -> None:
        if _settings.level is not LogLevel.SILENT:
            self._logger.warning(event, **self._make_event(**kwargs))


def get_logger(channel: Union[LogChannel, str] = LogChannel.SYSTEM) -> ChannelLogger:
    """Get a logger for `channel`; unknown channel names fall back to SYSTEM."""
    configure_logging()
    if isinstance(channel, str) and not isinstance(channel, LogChannel):
        channel = LogChannel.from_string(channel) or LogChannel.SYSTEM
    return ChannelLogger(channel=channel)


def get_current_config() -> dict:
    """The active level, format and channels, by name."""
    return {
        "level": _settings.level.name,
        "format": _settings.format,
        "channels": sorted(ch.value for ch in _settings.channels),
    }
