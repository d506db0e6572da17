"""Error-handling utilities shared across modules.

Includes the `handle_errors` decorator to log and re-raise exceptions with
operation context, and the exception types raised by the services.
"""
from functools import wraps
import logging


logger = logging.getLogger(__name__)


class EmptyDocumentError(ValueError):
    """A document was read successfully but holds no text."""


class StoreConfigurationError(RuntimeError):
    """The selected document store is missing settings."""


def handle_errors(operation_name: str):
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{operation_name} failed: {e}")
                raise
        return wrapper
    return decorator
