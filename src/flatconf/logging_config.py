# src/flatconf/logging_config.py
"""
Opt-in console logging for applications that embed flatconf.

flatconf itself only logs at DEBUG through ``logging.getLogger(__name__)``
and never installs handlers. An application that wants to see those records,
or report load and conversion errors on the console, can call
:func:`configure_logging` once at startup.

Key concept:

    **Display filter**: When ``console_enabled=False`` (the default), the
    console handler still exists but only passes log records that carry
    ``extra={"display": True}``. Use :func:`log_display` to send such a
    record, e.g. to tell the user that a configuration file was missing and
    defaults are in effect.

Usage:
    import logging
    from flatconf.logging_config import configure_logging, log_display

    configure_logging()
    logger = logging.getLogger("myapp")
    config, err = flatconf.load("app.cfg")
    if err is not None:
        log_display(logger, logging.WARNING, "%s", err)
"""

import logging
import sys
from typing import Any

DEFAULT_LOGGING_CONFIG: dict[str, Any] = {
    "console_enabled": False,
    "console_level": "WARNING",
    "console_format": "%(levelname)s - %(message)s",
    "display_min_level": "INFO",
    "components": {
        "flatconf": "WARNING",
    },
}

_configured = False
_console_handler: logging.Handler | None = None


class DisplayFilter(logging.Filter):
    """Controls which log records pass through to the console handler.

    Behavior matrix::

        +------------------------+--------------+-----------------+
        | console_globally_      | display=True | display=False/  |
        | enabled                |              | absent          |
        +------------------------+--------------+-----------------+
        | True                   | PASS         | PASS            |
        | False (default)        | PASS*        | BLOCK           |
        +------------------------+--------------+-----------------+

        * subject to display_min_level
    """

    def __init__(
        self,
        console_globally_enabled: bool = False,
        display_min_level: int = logging.INFO,
    ) -> None:
        super().__init__()
        self.console_globally_enabled = console_globally_enabled
        self.display_min_level = display_min_level

    def filter(self, record: logging.LogRecord) -> bool:
        if self.console_globally_enabled:
            return True  # handler level does the filtering

        if getattr(record, "display", False):
            return record.levelno >= self.display_min_level

        return False


def _resolve_level(level: str | int, fallback: int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else fallback


def configure_logging(
    config: dict[str, Any] | None = None,
    force_reconfigure: bool = False,
) -> logging.Handler:
    """
    Install a console handler on the root logger.

    Args:
        config: Overrides merged over ``DEFAULT_LOGGING_CONFIG``.
        force_reconfigure: Replace the handler even if already configured.

    Returns:
        The console handler in use.
    """
    global _configured, _console_handler

    if _configured and not force_reconfigure and _console_handler is not None:
        return _console_handler

    log_config = {**DEFAULT_LOGGING_CONFIG, **(config or {})}
    root_logger = logging.getLogger()

    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)
        _console_handler.close()

    console_enabled = bool(log_config.get("console_enabled", False))
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(log_config["console_format"]))
    if console_enabled:
        handler.setLevel(_resolve_level(log_config["console_level"], logging.WARNING))
    else:
        # The filter is the only gate in quiet mode
        handler.setLevel(logging.DEBUG)
    handler.addFilter(
        DisplayFilter(
            console_globally_enabled=console_enabled,
            display_min_level=_resolve_level(log_config["display_min_level"], logging.INFO),
        )
    )

    root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG)

    for component_name, level_str in log_config.get("components", {}).items():
        logging.getLogger(component_name).setLevel(_resolve_level(level_str, logging.WARNING))

    _configured = True
    _console_handler = handler
    return handler


def reset_logging() -> None:
    """Remove the handler installed by :func:`configure_logging`."""
    global _configured, _console_handler

    if _console_handler is not None:
        logging.getLogger().removeHandler(_console_handler)
        _console_handler.close()
    _console_handler = None
    _configured = False


def log_display(
    logger: logging.Logger,
    level: int,
    msg: str,
    *args: Any,
    **kwargs: Any,
) -> None:
    """Log a message that reaches the console even in quiet mode.

    Sets ``extra={"display": True}``, merged with any ``extra`` the caller
    passes. ``display_min_level`` still applies.
    """
    extra = dict(kwargs.pop("extra", None) or {})
    extra["display"] = True
    kwargs["extra"] = extra
    logger.log(level, msg, *args, **kwargs)
