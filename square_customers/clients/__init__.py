"""
Square REST clients organized by resource.

The base transport is shared by every resource client; SquareClient wires
them together.
"""

from .base_client import HttpClient, HttpResponse
from .customers_client import CustomersApi
from .unified_client import SquareClient

__all__ = [
    "HttpClient",
    "HttpResponse",
    "CustomersApi",
    "SquareClient",
]
