"""
Middleware package.
"""
from chai_api.middleware.error_handler import ErrorHandlerMiddleware
from chai_api.middleware.request_id import RequestIdMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "RequestIdMiddleware",
]
