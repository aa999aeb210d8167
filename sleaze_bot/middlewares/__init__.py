from .cors import cors_middleware
from .errors import error_middleware
from .request_context import request_context_middleware

__all__ = [
    "cors_middleware",
    "error_middleware",
    "request_context_middleware",
]
