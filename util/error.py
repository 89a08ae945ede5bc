import json
import logging
from contextlib import contextmanager

from error import PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def handle_storage_error(operation):
    """Context manager turning file and JSON errors into PersistenceError"""
    try:
        yield
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Error during {operation}: {str(e)}")
        raise PersistenceError(f"Error during {operation}") from e
