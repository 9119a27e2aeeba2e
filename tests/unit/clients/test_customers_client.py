"""Tests unitarios para CustomersApi: URL, verbo y tipo de respuesta por operación."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from square_customers.clients.customers_client import CustomersApi
from square_customers.schemas.common import SortOrder
from square_customers.schemas.customer_schemas import (
    AddGroupToCustomerResponse,
    CreateCustomerRequest,
    CreateCustomerResponse,
    CustomerQuery,
    CustomerSort,
    CustomerSortField,
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
from square_customers.utils.error_handler import SquareAPIException, ValidationException

BASE = "https://connect.squareupsandbox.com/v2/customers"


@pytest.fixture
def http_client(make_response):
    """HttpClient mock whose verbs answer with an empty 200."""
    client = MagicMock()
    for verb in ["get", "post", "put", "delete", "empty_put"]:
        setattr(client, verb, AsyncMock(return_value=make_response(body="{}")))
    return client


@pytest.fixture
def api(configuration, http_client):
    return CustomersApi(configuration, http_client)


class TestUrlConstruction:
    """Tests para la construcción de URLs."""

    def test_base_url_uses_environment_and_base_uri(self, api):
        assert api.url() == BASE

    @pytest.mark.asyncio
    async def test_group_membership_url(self, api, http_client):
        """customer "abc" y group "g1" deben producir /customers/abc/groups/g1."""
        await api.add_group_to_customer("abc", "g1")

        http_client.empty_put.assert_awaited_once_with(f"{BASE}/abc/groups/g1")

    @pytest.mark.asyncio
    async def test_path_segments_are_percent_encoded(self, api, http_client):
        await api.retrieve_customer("a/b c")

        http_client.get.assert_awaited_once_with(f"{BASE}/a%2Fb%20c")

    @pytest.mark.asyncio
    async def test_empty_customer_id_is_rejected_before_request(self, api, http_client):
        with pytest.raises(ValidationException) as exc_info:
            await api.retrieve_customer("")

        assert exc_info.value.field == "customer_id"
        http_client.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_group_id_is_rejected_before_request(self, api, http_client):
        with pytest.raises(ValidationException):
            await api.remove_group_from_customer("abc", "")

        http_client.delete.assert_not_awaited()


class TestListCustomers:
    """Tests para list_customers."""

    @pytest.mark.asyncio
    async def test_without_params_has_no_query_string(self, api, http_client):
        result = await api.list_customers()

        http_client.get.assert_awaited_once_with(BASE)
        assert isinstance(result, ListCustomersResponse)

    @pytest.mark.asyncio
    async def test_params_become_query_string(self, api, http_client):
        params = ListCustomersParameters(
            cursor="abc123",
            limit=50,
            sort_field=CustomerSortField.CREATED_AT,
            sort_order=SortOrder.ASC,
            count=True,
        )

        await api.list_customers(params)

        http_client.get.assert_awaited_once_with(
            f"{BASE}?cursor=abc123&limit=50&sort_field=CREATED_AT&sort_order=ASC&count=true"
        )

    @pytest.mark.asyncio
    async def test_returns_customers_and_cursor(self, api, http_client, make_response, customer_json):
        http_client.get.return_value = make_response(body=json.dumps({"customers": [customer_json], "cursor": "next"}))

        result = await api.list_customers()

        assert result.cursor == "next"
        assert result.customers[0].id == customer_json["id"]


class TestCreateAndSearch:
    """Tests para create_customer y search_customers."""

    @pytest.mark.asyncio
    async def test_create_posts_body_to_base_path(self, api, http_client, make_response, customer_json):
        http_client.post.return_value = make_response(body=json.dumps({"customer": customer_json}))
        body = CreateCustomerRequest(given_name="Amelia", family_name="Earhart", idempotency_key="k-1")

        result = await api.create_customer(body)

        http_client.post.assert_awaited_once_with(BASE, body)
        assert isinstance(result, CreateCustomerResponse)
        assert result.customer.given_name == "Amelia"

    @pytest.mark.asyncio
    async def test_search_posts_to_search_path(self, api, http_client):
        body = SearchCustomersRequest(
            limit=2,
            query=CustomerQuery(sort=CustomerSort(field=CustomerSortField.CREATED_AT, order=SortOrder.DESC)),
        )

        result = await api.search_customers(body)

        http_client.post.assert_awaited_once_with(f"{BASE}/search", body)
        assert isinstance(result, SearchCustomersResponse)


class TestSingleCustomerOperations:
    """Tests para retrieve, update y delete."""

    @pytest.mark.asyncio
    async def test_retrieve_uses_get(self, api, http_client):
        result = await api.retrieve_customer("abc")

        http_client.get.assert_awaited_once_with(f"{BASE}/abc")
        assert isinstance(result, RetrieveCustomerResponse)

    @pytest.mark.asyncio
    async def test_update_uses_put_with_body(self, api, http_client):
        body = UpdateCustomerRequest(email_address="new@example.com", version=3)

        result = await api.update_customer("abc", body)

        http_client.put.assert_awaited_once_with(f"{BASE}/abc", body)
        assert isinstance(result, UpdateCustomerResponse)

    @pytest.mark.asyncio
    async def test_delete_passes_version_verbatim(self, api, http_client):
        result = await api.delete_customer("abc", DeleteCustomerParameters(version=7))

        http_client.delete.assert_awaited_once_with(f"{BASE}/abc?version=7")
        assert isinstance(result, DeleteCustomerResponse)

    @pytest.mark.asyncio
    async def test_delete_without_params(self, api, http_client):
        await api.delete_customer("abc")

        http_client.delete.assert_awaited_once_with(f"{BASE}/abc")


class TestGroupMembership:
    """Tests para add/remove de grupos."""

    @pytest.mark.asyncio
    async def test_add_uses_empty_put(self, api, http_client):
        result = await api.add_group_to_customer("abc", "g1")

        http_client.put.assert_not_awaited()
        assert isinstance(result, AddGroupToCustomerResponse)

    @pytest.mark.asyncio
    async def test_remove_uses_delete(self, api, http_client):
        result = await api.remove_group_from_customer("abc", "g1")

        http_client.delete.assert_awaited_once_with(f"{BASE}/abc/groups/g1")
        assert isinstance(result, RemoveGroupFromCustomerResponse)


class TestErrorPropagation:
    """Los errores del transporte llegan sin modificar al llamador."""

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self, api, http_client, make_response, not_found_json):
        http_client.get.return_value = make_response(status=404, body=json.dumps(not_found_json))

        with pytest.raises(SquareAPIException) as exc_info:
            await api.retrieve_customer("missing")

        assert exc_info.value.api_response_code == 404
        assert exc_info.value.errors[0].code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_transport_exception_is_not_wrapped(self, api, http_client):
        error = SquareAPIException("boom", api_response_code=500)
        http_client.post.side_effect = error

        with pytest.raises(SquareAPIException) as exc_info:
            await api.create_customer(CreateCustomerRequest(given_name="X"))

        assert exc_info.value is error
        assert http_client.post.await_count == 1
