"""
Database utilities and transaction management.
"""

import contextlib
import logging
from typing import Iterator

from django.db import DatabaseError, IntegrityError

from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def persistence_errors(operation: str) -> Iterator[None]:
    """
    Translate database failures into PersistenceError.

    IntegrityError is re-raised untouched so callers can map constraint
    violations to their own domain errors.

    Usage:
        with persistence_errors("create activation code"):
            # Database operations
            pass

    Args:
        operation: Short description used in the log line
    """
    try:
        yield
    except IntegrityError:
        raise
    except DatabaseError as e:
        logger.error("Database failure during %s: %s", operation, e, exc_info=True)
        raise PersistenceError(f"Storage operation failed: {operation}") from e
