"""
Middleware modules for the projects API.
"""
from .request_log import RequestLogMiddleware, configure_request_log_middleware

__all__ = [
    'RequestLogMiddleware',
    'configure_request_log_middleware',
]
