"""
Shared Pydantic models for the Square API.

Base model, error envelope, address and the query-string helper used by
every parameters object.
"""

from enum import Enum
from typing import List, Optional, Union
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


class SquareModel(BaseModel):
    """Base for every Square record: immutable, unknown fields ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    def to_payload(self) -> dict:
        """JSON-ready dict with unset (None) fields dropped."""
        return self.model_dump(mode="json", exclude_none=True)


class SortOrder(str, Enum):
    """Orden de resultados."""

    DESC = "DESC"
    ASC = "ASC"


class ErrorCategory(str, Enum):
    """Categorías de error devueltas por Square."""

    API_ERROR = "API_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    INVALID_REQUEST_ERROR = "INVALID_REQUEST_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    PAYMENT_METHOD_ERROR = "PAYMENT_METHOD_ERROR"
    REFUND_ERROR = "REFUND_ERROR"
    MERCHANT_SUBSCRIPTION_ERROR = "MERCHANT_SUBSCRIPTION_ERROR"
    EXTERNAL_VENDOR_ERROR = "EXTERNAL_VENDOR_ERROR"


class SquareError(SquareModel):
    """A single error entry, as found in the `errors` array of any response."""

    # Categories added by Square after this release are kept as plain strings
    category: Union[ErrorCategory, str] = Field(union_mode="left_to_right")
    code: str
    detail: Optional[str] = None
    field: Optional[str] = None


class ErrorResponse(SquareModel):
    """Body of a non-2xx response."""

    errors: List[SquareError] = Field(default_factory=list)


class Address(SquareModel):
    """Physical address."""

    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    address_line_3: Optional[str] = None
    locality: Optional[str] = None
    sublocality: Optional[str] = None
    sublocality_2: Optional[str] = None
    sublocality_3: Optional[str] = None
    administrative_district_level_1: Optional[str] = None
    administrative_district_level_2: Optional[str] = None
    administrative_district_level_3: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class QueryParameters(SquareModel):
    """
    Base for endpoint query parameters.

    Subclasses declare their fields in the order they should appear in the
    query string.
    """

    def to_query_string(self) -> str:
        """
        Render the set fields as a query string.

        Returns:
            str: "" when nothing is set, otherwise "?key=value&..."
        """
        pairs = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, Enum):
                value = value.value
            elif isinstance(value, bool):
                value = "true" if value else "false"
            pairs.append((name, value))

        if not pairs:
            return ""
        return f"?{urlencode(pairs)}"
