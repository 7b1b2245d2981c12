"""HTTP middleware. Applied in pastebox.main."""

from pastebox.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = ["RequestSizeLimitMiddleware"]
