"""
Square client for customer operations.

Create and manage customer profiles and sync CRM systems with Square. The
Customers API also supports searching profiles by various criteria,
including customer group membership.
"""

import logging
from typing import Optional
from urllib.parse import quote

from square_customers.core.config import Configuration
from square_customers.schemas.customer_schemas import (
    AddGroupToCustomerResponse,
    CreateCustomerRequest,
    CreateCustomerResponse,
    DeleteCustomerParameters,
    DeleteCustomerResponse,
    ListCustomersParameters,
    ListCustomersResponse,
    RemoveGroupFromCustomerResponse,
    RetrieveCustomerResponse,
    SearchCustomersRequest,
    SearchCustomersResponse,
    UpdateCustomerRequest,
    UpdateCustomerResponse,
)
from square_customers.utils.error_handler import ValidationException

from .base_client import HttpClient

logger = logging.getLogger(__name__)

DEFAULT_URI = "/customers"


def _path_segment(value: str, field: str) -> str:
    if not value:
        raise ValidationException(f"{field} must not be empty", field=field, invalid_value=value)
    return quote(value, safe="")


class CustomersApi:
    """
    Client for the /customers endpoints.

    Holds the shared configuration and HTTP transport; every method performs
    one request and returns the typed response.
    """

    def __init__(self, config: Configuration, http_client: HttpClient):
        self.config = config
        self.http_client = http_client

    async def list_customers(self, params: Optional[ListCustomersParameters] = None) -> ListCustomersResponse:
        """
        List customer profiles associated with a Square account.

        Newly created or updated profiles usually become available to this
        endpoint in well under 30 seconds, occasionally a minute or more.

        Args:
            params: Pagination cursor, limit, sort and count options

        Returns:
            ListCustomersResponse: A page of customers and the next cursor
        """
        query = params.to_query_string() if params else ""
        url = f"{self.url()}{query}"
        logger.debug(f"Listing customers: {url}")

        response = await self.http_client.get(url)
        return response.deserialize(ListCustomersResponse)

    async def create_customer(self, body: CreateCustomerRequest) -> CreateCustomerResponse:
        """
        Create a new customer for a business.

        At least one of given_name, family_name, company_name, email_address
        or phone_number must be provided.

        Args:
            body: Customer fields and optional idempotency key

        Returns:
            CreateCustomerResponse: The created customer
        """
        response = await self.http_client.post(self.url(), body)
        return response.deserialize(CreateCustomerResponse)

    async def search_customers(self, body: SearchCustomersRequest) -> SearchCustomersResponse:
        """
        Search customer profiles using a supported query filter.

        Without an explicit filter, all profiles are returned ordered
        alphabetically by given_name and family_name.

        Args:
            body: Query filter, sort, cursor and limit

        Returns:
            SearchCustomersResponse: Matching customers and the next cursor
        """
        url = f"{self.url()}/search"
        response = await self.http_client.post(url, body)
        return response.deserialize(SearchCustomersResponse)

    async def delete_customer(
        self, customer_id: str, params: Optional[DeleteCustomerParameters] = None
    ) -> DeleteCustomerResponse:
        """
        Delete a customer profile from a business.

        This also unlinks any associated cards on file. Pass the current
        profile version in params to enable optimistic concurrency control.
        Profiles created by merging must be deleted using the new profile's id.

        Args:
            customer_id: ID of the customer to delete
            params: Optional version token

        Returns:
            DeleteCustomerResponse: Empty on success
        """
        query = params.to_query_string() if params else ""
        url = f"{self.url()}/{_path_segment(customer_id, 'customer_id')}{query}"
        logger.info(f"Deleting customer {customer_id}")

        response = await self.http_client.delete(url)
        return response.deserialize(DeleteCustomerResponse)

    async def retrieve_customer(self, customer_id: str) -> RetrieveCustomerResponse:
        """
        Return details for a single customer.

        Args:
            customer_id: ID of the customer to retrieve

        Returns:
            RetrieveCustomerResponse: The customer
        """
        url = f"{self.url()}/{_path_segment(customer_id, 'customer_id')}"
        response = await self.http_client.get(url)
        return response.deserialize(RetrieveCustomerResponse)

    async def update_customer(self, customer_id: str, body: UpdateCustomerRequest) -> UpdateCustomerResponse:
        """
        Update a customer profile.

        To change an attribute, specify the new value; to remove it, send an
        empty string or empty object. Include `version` for optimistic
        concurrency. Cards on file cannot be changed through this endpoint.

        Args:
            customer_id: ID of the customer to update
            body: Fields to change

        Returns:
            UpdateCustomerResponse: The updated customer
        """
        url = f"{self.url()}/{_path_segment(customer_id, 'customer_id')}"
        response = await self.http_client.put(url, body)
        return response.deserialize(UpdateCustomerResponse)

    async def remove_group_from_customer(self, customer_id: str, group_id: str) -> RemoveGroupFromCustomerResponse:
        """
        Remove a group membership from a customer.

        Args:
            customer_id: ID of the customer
            group_id: ID of the customer group

        Returns:
            RemoveGroupFromCustomerResponse: Empty on success
        """
        url = self._group_url(customer_id, group_id)
        logger.info(f"Removing customer {customer_id} from group {group_id}")

        response = await self.http_client.delete(url)
        return response.deserialize(RemoveGroupFromCustomerResponse)

    async def add_group_to_customer(self, customer_id: str, group_id: str) -> AddGroupToCustomerResponse:
        """
        Add a group membership to a customer.

        Args:
            customer_id: ID of the customer
            group_id: ID of the customer group

        Returns:
            AddGroupToCustomerResponse: Empty on success
        """
        url = self._group_url(customer_id, group_id)
        logger.info(f"Adding customer {customer_id} to group {group_id}")

        response = await self.http_client.empty_put(url)
        return response.deserialize(AddGroupToCustomerResponse)

    def url(self) -> str:
        return f"{self.config.get_base_url()}{DEFAULT_URI}"

    def _group_url(self, customer_id: str, group_id: str) -> str:
        return (
            f"{self.url()}/{_path_segment(customer_id, 'customer_id')}"
            f"/groups/{_path_segment(group_id, 'group_id')}"
        )

    def __repr__(self):
        return f"CustomersApi(url='{self.url()}')"
