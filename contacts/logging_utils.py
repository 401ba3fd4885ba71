import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from .constants import MAX_LOGGED_VALUE_LENGTH


def log_user_action(
    action: str, logger_name: str = "user_actions", **kwargs: Any
) -> None:
    """Log user actions with consistent structure.

    Args:
        action: The action being performed (e.g., 'add_record', 'edit_record')
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {
        "action": action,
        "timestamp": datetime.now(UTC).isoformat(),
        **kwargs,
    }

    logger.info(f"User action: {action}", extra=log_data)


def log_catalog_operation(
    operation: str,
    path: Path | None,
    success: bool = True,
    logger_name: str = "catalog",
    **kwargs: Any,
) -> None:
    """Log catalog persistence operations.

    Args:
        operation: Persistence operation (load, save)
        path: Persistence target, None for an in-memory catalog
        success: Whether the operation was successful
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    target = str(path) if path is not None else "<memory>"
    log_data = {"operation": operation, "path": target, "success": success, **kwargs}

    level = logging.INFO if success else logging.ERROR
    status = "succeeded" if success else "failed"

    logger.log(level, f"Catalog {operation} on {target} {status}", extra=log_data)


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "validation"
) -> None:
    """Log validation errors with context.

    Args:
        field: Field name that failed validation
        value: The invalid value (will be truncated)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    safe_value = str(value)[:MAX_LOGGED_VALUE_LENGTH]

    logger.warning(
        f"Validation failed for field '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )
