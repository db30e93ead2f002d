"""HTTP middleware and exception handlers."""

from directory_api.middleware.error_handler import register_error_handlers
from directory_api.middleware.logging import add_request_id_middleware

__all__ = ["add_request_id_middleware", "register_error_handlers"]
