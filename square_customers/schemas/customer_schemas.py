"""
Pydantic models for the Square Customers API.

Request bodies, query parameters and response envelopes for the
/v2/customers endpoints. Models carry no behaviour: the field lists mirror
Square's published JSON schema and optional fields are omitted on the wire
when unset.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from .common import Address, QueryParameters, SortOrder, SquareError, SquareModel


class CustomerSortField(str, Enum):
    """Campos por los que se pueden ordenar los clientes."""

    DEFAULT = "DEFAULT"
    CREATED_AT = "CREATED_AT"


class CustomerCreationSource(str, Enum):
    """Origen desde el que se creó el perfil del cliente."""

    OTHER = "OTHER"
    APPOINTMENTS = "APPOINTMENTS"
    COUPON = "COUPON"
    DELETION_RECOVERY = "DELETION_RECOVERY"
    DIRECTORY = "DIRECTORY"
    EGIFTING = "EGIFTING"
    EMAIL_COLLECTION = "EMAIL_COLLECTION"
    FEEDBACK = "FEEDBACK"
    IMPORT = "IMPORT"
    INVOICES = "INVOICES"
    LOYALTY = "LOYALTY"
    MARKETING = "MARKETING"
    MERGE = "MERGE"
    ONLINE_STORE = "ONLINE_STORE"
    INSTANT_PROFILE = "INSTANT_PROFILE"
    TERMINAL = "TERMINAL"
    THIRD_PARTY = "THIRD_PARTY"
    THIRD_PARTY_IMPORT = "THIRD_PARTY_IMPORT"
    UNMERGE_RECOVERY = "UNMERGE_RECOVERY"


class CustomerInclusionExclusion(str, Enum):
    """Regla de inclusión/exclusión para filtros por origen."""

    INCLUDE = "INCLUDE"
    EXCLUDE = "EXCLUDE"


# Customer


class CustomerPreferences(SquareModel):
    """Preferencias de contacto del cliente."""

    email_unsubscribed: Optional[bool] = None


class CustomerTaxIds(SquareModel):
    """Identificadores fiscales del cliente."""

    eu_vat: Optional[str] = None


class Customer(SquareModel):
    """Modelo para perfil de cliente de Square."""

    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    nickname: Optional[str] = None
    company_name: Optional[str] = None
    email_address: Optional[str] = None
    address: Optional[Address] = None
    phone_number: Optional[str] = None
    birthday: Optional[str] = None
    reference_id: Optional[str] = None
    note: Optional[str] = None
    preferences: Optional[CustomerPreferences] = None
    creation_source: Optional[CustomerCreationSource] = None
    group_ids: Optional[List[str]] = None
    segment_ids: Optional[List[str]] = None
    version: Optional[int] = None
    tax_ids: Optional[CustomerTaxIds] = None


# Query parameters


class ListCustomersParameters(QueryParameters):
    """Query parameters for GET /v2/customers."""

    cursor: Optional[str] = None
    limit: Optional[int] = None
    sort_field: Optional[CustomerSortField] = None
    sort_order: Optional[SortOrder] = None
    count: Optional[bool] = None


class DeleteCustomerParameters(QueryParameters):
    """Query parameters for DELETE /v2/customers/{customer_id}."""

    # Optimistic concurrency token, passed through untouched.
    version: Optional[int] = None


# Search query


class CustomerCreationSourceFilter(SquareModel):
    """Filtro por origen de creación."""

    values: Optional[List[CustomerCreationSource]] = None
    rule: Optional[CustomerInclusionExclusion] = None


class TimeRange(SquareModel):
    """Rango de tiempo; cualquiera de los extremos puede omitirse."""

    start_at: Optional[datetime] = None
    end_at: Optional[datetime] = None


class CustomerTextFilter(SquareModel):
    """Filtro de texto exacto o difuso."""

    exact: Optional[str] = None
    fuzzy: Optional[str] = None


class FilterValue(SquareModel):
    """Filtro sobre una lista de ids."""

    all: Optional[List[str]] = None
    any: Optional[List[str]] = None
    none: Optional[List[str]] = None


class CustomerFilter(SquareModel):
    """Combinación (AND) de filtros de búsqueda."""

    creation_source: Optional[CustomerCreationSourceFilter] = None
    created_at: Optional[TimeRange] = None
    updated_at: Optional[TimeRange] = None
    email_address: Optional[CustomerTextFilter] = None
    phone_number: Optional[CustomerTextFilter] = None
    reference_id: Optional[CustomerTextFilter] = None
    group_ids: Optional[FilterValue] = None
    segment_ids: Optional[FilterValue] = None


class CustomerSort(SquareModel):
    """Orden de los resultados de búsqueda."""

    field: Optional[CustomerSortField] = None
    order: Optional[SortOrder] = None


class CustomerQuery(SquareModel):
    """Filtro y orden de una búsqueda de clientes."""

    filter: Optional[CustomerFilter] = None
    sort: Optional[CustomerSort] = None


# Request bodies


class CreateCustomerRequest(SquareModel):
    """
    Body for POST /v2/customers.

    Square requires at least one of given_name, family_name, company_name,
    email_address or phone_number; the server enforces it.
    """

    idempotency_key: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    company_name: Optional[str] = None
    nickname: Optional[str] = None
    email_address: Optional[str] = None
    address: Optional[Address] = None
    phone_number: Optional[str] = None
    reference_id: Optional[str] = None
    note: Optional[str] = None
    birthday: Optional[str] = None
    tax_ids: Optional[CustomerTaxIds] = None


class UpdateCustomerRequest(SquareModel):
    """
    Body for PUT /v2/customers/{customer_id}.

    An empty string or empty object clears an attribute. `version` is the
    optimistic concurrency token and must match the stored profile.
    """

    given_name: Optional[str] = None
    family_name: Optional[str] = None
    company_name: Optional[str] = None
    nickname: Optional[str] = None
    email_address: Optional[str] = None
    address: Optional[Address] = None
    phone_number: Optional[str] = None
    reference_id: Optional[str] = None
    note: Optional[str] = None
    birthday: Optional[str] = None
    version: Optional[int] = None
    tax_ids: Optional[CustomerTaxIds] = None


class SearchCustomersRequest(SquareModel):
    """Body for POST /v2/customers/search."""

    cursor: Optional[str] = None
    limit: Optional[int] = None
    query: Optional[CustomerQuery] = None
    count: Optional[bool] = None


# Responses


class ListCustomersResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
    customers: Optional[List[Customer]] = None
    cursor: Optional[str] = None
    count: Optional[int] = None


class SearchCustomersResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
    customers: Optional[List[Customer]] = None
    cursor: Optional[str] = None
    count: Optional[int] = None


class CreateCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
    customer: Optional[Customer] = None


class RetrieveCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
    customer: Optional[Customer] = None


class UpdateCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
    customer: Optional[Customer] = None


class DeleteCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None


class AddGroupToCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None


class RemoveGroupFromCustomerResponse(SquareModel):
    errors: Optional[List[SquareError]] = None
