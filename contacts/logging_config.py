import logging

import structlog
from rich.console import Console
from rich.logging import RichHandler

from .config import settings
from .constants import LOG_FILE_NAME


def setup_logging(log_level: str | None = None) -> None:
    """Configure logging for the application.

    Args:
        log_level: Override the log level from settings
    """
    # Determine log level
    if log_level:
        level = getattr(logging, log_level.upper(), logging.WARNING)
    else:
        level = logging.DEBUG if settings.debug else logging.WARNING

    formatter = logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Clear any existing handlers
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    # Console handler with Rich on stderr, keeping stdout for command output
    console_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=settings.debug,
        show_time=False,  # We handle time in formatter
    )
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(
            settings.log_dir / LOG_FILE_NAME, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    _configure_structlog()

    logger = get_logger(__name__)
    logger.debug("Logging configured", level=logging.getLevelName(level))


def _configure_structlog() -> None:
    """Configure structlog to render events through the stdlib handlers."""
    if settings.debug:
        # Development: Pretty console output
        renderer: structlog.typing.Processor = structlog.dev.ConsoleRenderer(
            colors=False
        )
    else:
        # Production: JSON lines
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    """Get a logger with the given name.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)
