"""
Observability helpers.

Adds timing and structured logging context to store operations.
"""

import time
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.app.core.config import settings
from tracker.app.core.exceptions import ResourceNotFoundError

# Configure structured logger
logger = logging.getLogger("tracker")


def configure_logging(level: str = None) -> None:
    """Apply the configured log level to the tracker logger."""
    logger.setLevel((level or settings.log_level).upper())


@asynccontextmanager
async def timed_operation(operation: str, session: AsyncSession = None, **context: Any):
    """
    Time a single storage operation and log its outcome.
    
    The wrapped block's exceptions are logged and re-raised untouched.
    On a storage failure the given session is rolled back first, so it
    stays usable for the next operation.
    Callers may add fields to the yielded dict (e.g. the assigned number).
    """
    log_data: Dict[str, Any] = {"operation": operation, **context}
    start_time = time.perf_counter()
    
    try:
        yield log_data
    except ResourceNotFoundError:
        log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
        logger.warning("Parcel Not Found", extra=log_data)
        raise
    except SQLAlchemyError as exc:
        log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
        log_data["error"] = type(exc).__name__
        logger.error("Storage Failed", extra=log_data)
        if session is not None:
            await session.rollback()
        raise
    
    log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
    logger.debug("Storage Operation", extra=log_data)
