"""HTTP middleware"""

from .logging import StructuredLoggingMiddleware

__all__ = ["StructuredLoggingMiddleware"]
