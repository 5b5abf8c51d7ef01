"""
Structured Logging

DESIGN DECISION: Logging is configured once, at the host's request.
The core never prints; it emits structured events through structlog
so the host decides where lines go and how they are rendered.

What gets logged:
- Aggregation calls at debug level (input and output sizes only)

What does NOT get logged:
- Rejected keypad expressions (an expected, per-keystroke condition)
- Transaction notes or amounts
"""

import logging
from typing import Optional

import structlog

from mycost.config import LoggingSettings, get_settings


_configured = False


def configure_logging(settings: Optional[LoggingSettings] = None) -> None:
    """
    Configure structlog and the stdlib root logger.

    Args:
        settings: Logging settings to apply.
                  If None, loaded from the environment, and
                  debug_mode in the app settings forces DEBUG.

    Safe to call more than once; the last call wins.
    """
    global _configured

    if settings is None:
        settings = get_settings().logging
        if get_settings().app.debug_mode:
            settings = settings.model_copy(update={"level": "DEBUG"})

    level = getattr(logging, settings.level)
    logging.basicConfig(format="%(message)s", level=level)
    # basicConfig is a no-op once the host has configured the root logger
    logging.getLogger("mycost").setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a bound logger, configuring logging with defaults on first use.
    """
    if not _configured:
        configure_logging()
    return structlog.get_logger(name)
