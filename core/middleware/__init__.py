"""HTTP middleware."""
from .security import SecurityHeadersMiddleware

__all__ = ["SecurityHeadersMiddleware"]
