"""
Pydantic models mirroring Square's JSON schema.
"""

from .common import (
    Address,
    ErrorCategory,
    ErrorResponse,
    QueryParameters,
    SortOrder,
    SquareError,
    SquareModel,
)
from .customer_schemas import (
    AddGroupToCustomerResponse,
    CreateCustomerRequest,
    CreateCustomerResponse,
    Customer,
    CustomerCreationSource,
    CustomerCreationSourceFilter,
    CustomerFilter,
    CustomerInclusionExclusion,
    CustomerPreferences,
    CustomerQuery,
    CustomerSort,
    CustomerSortField,
    CustomerTaxIds,
    CustomerTextFilter,
    DeleteCustomerParameters,
    DeleteCustomerResponse,
    FilterValue,
    ListCustomersParameters,
    ListCustomersResponse,
    RemoveGroupFromCustomerResponse,
    RetrieveCustomerResponse,
    SearchCustomersRequest,
    SearchCustomersResponse,
    TimeRange,
    UpdateCustomerRequest,
    UpdateCustomerResponse,
)
from .webhook_schemas import (
    LocationCreatedEventData,
    LocationCreatedWebhookResponse,
    LocationUpdatedEventData,
    LocationUpdatedWebhookResponse,
    LocationWebhookEventType,
)

__all__ = [
    "Address",
    "ErrorCategory",
    "ErrorResponse",
    "QueryParameters",
    "SortOrder",
    "SquareError",
    "SquareModel",
    "AddGroupToCustomerResponse",
    "CreateCustomerRequest",
    "CreateCustomerResponse",
    "Customer",
    "CustomerCreationSource",
    "CustomerCreationSourceFilter",
    "CustomerFilter",
    "CustomerInclusionExclusion",
    "CustomerPreferences",
    "CustomerQuery",
    "CustomerSort",
    "CustomerSortField",
    "CustomerTaxIds",
    "CustomerTextFilter",
    "DeleteCustomerParameters",
    "DeleteCustomerResponse",
    "FilterValue",
    "ListCustomersParameters",
    "ListCustomersResponse",
    "RemoveGroupFromCustomerResponse",
    "RetrieveCustomerResponse",
    "SearchCustomersRequest",
    "SearchCustomersResponse",
    "TimeRange",
    "UpdateCustomerRequest",
    "UpdateCustomerResponse",
    "LocationCreatedEventData",
    "LocationCreatedWebhookResponse",
    "LocationUpdatedEventData",
    "LocationUpdatedWebhookResponse",
    "LocationWebhookEventType",
]
