"""
Asynchronous client for the Square Customers API and webhook event models.
"""

from .clients import CustomersApi, HttpClient, HttpResponse, SquareClient
from .core.config import Configuration, Environment, Settings, get_settings
from .utils.error_handler import (
    AppException,
    DeserializationException,
    SquareAPIException,
    SquareConnectionException,
    ValidationException,
    WebhookSignatureException,
)
from .version import VERSION

__version__ = VERSION

__all__ = [
    "SquareClient",
    "CustomersApi",
    "HttpClient",
    "HttpResponse",
    "Configuration",
    "Environment",
    "Settings",
    "get_settings",
    "AppException",
    "DeserializationException",
    "SquareAPIException",
    "SquareConnectionException",
    "ValidationException",
    "WebhookSignatureException",
    "VERSION",
]
