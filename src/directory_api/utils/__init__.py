"""Utility functions package."""

from directory_api.utils.exceptions import DirectoryError, InvalidStateError, NotFoundError
from directory_api.utils.logger import get_logger

__all__ = ["DirectoryError", "InvalidStateError", "NotFoundError", "get_logger"]
