"""
Rally console logging.

Every module asks for a named logger and writes printf-style messages;
lines come out as ``[name] LEVEL: message`` on stdout. Levels can be set
globally or per logger name, from code or from the environment.

Usage:
    from rally.logging import get_logger

    log = get_logger('pong_match')
    log.info("Match started at %s", profile.name)
    log.trace("tick %d ball=%r", tick, ball)   # per-tick detail

Environment:
    RALLY_LOG_LEVEL=DEBUG           # default for every logger
    RALLY_LOG_PONG_MATCH=TRACE      # only the 'pong_match' logger

Code:
    from rally.logging import configure_logging
    configure_logging(level='WARNING', modules={'pong_mode': 'DEBUG'})
"""

import os
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Severity, numbered like the stdlib logging levels plus TRACE and OFF."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


ENV_PREFIX = 'RALLY_LOG_'
_ENV_DEFAULT = ENV_PREFIX + 'LEVEL'

# Short tags printed in front of messages
_TAGS: Dict[LogLevel, str] = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}


def _format_message(module: str, tag: str, msg: str) -> str:
    return f"[{module}] {tag}: {msg}"


def _level_from_string(name: str) -> LogLevel:
    """Parse a level name; WARN is accepted, anything unknown means INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    try:
        return LogLevel[name]
    except KeyError:
        return LogLevel.INFO


def _module_key(module: str) -> str:
    """Normalize a logger name the way environment variable suffixes read."""
    return module.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """Set the default level and, optionally, per-logger levels.

    Args:
        level: Level name applied to every logger without its own level
        modules: Logger name -> level name overrides
    """
    _config['default_level'] = _level_from_string(level)
    for name, name_level in (modules or {}).items():
        _config['module_levels'][_module_key(name)] = _level_from_string(name_level)


def _load_env_config() -> None:
    """Apply RALLY_LOG_* environment variables."""
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        if key == _ENV_DEFAULT:
            _config['default_level'] = _level_from_string(value)
        else:
            _config['module_levels'][key[len(ENV_PREFIX):].lower()] = _level_from_string(value)


_load_env_config()


class RallyLogger:
    """Named console logger.

    Arguments are only interpolated into the message when the level is
    enabled, so per-tick trace calls cost little when TRACE is off.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Effective level: the logger's own override or the default."""
        return _config['module_levels'].get(self._module_key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, *args, tag: Optional[str] = None) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                # Keep the message even when the arguments don't fit it
                msg = f"{msg} {args}"
        print(_format_message(self.module, tag or _TAGS[level], msg))

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    warn = warning

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, *args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, msg, *args)

    def exception(self, msg: str, *args, exc_info: bool = True) -> None:
        """Log at ERROR, followed by the traceback being handled.

        Args:
            msg: What went wrong
            exc_info: Set False to skip the traceback
        """
        self._log(LogLevel.ERROR, msg, *args)
        if not exc_info:
            return
        formatted = traceback.format_exc().strip()
        if formatted and formatted != 'NoneType: None':
            for line in formatted.splitlines():
                self._log(LogLevel.ERROR, line, tag='TRACE')


@lru_cache(maxsize=64)
def get_logger(module: str) -> RallyLogger:
    """Logger for a module name; the same name always gives the same logger."""
    return RallyLogger(module)


def disable_logging() -> None:
    """Silence every logger, dropping per-logger overrides."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()
