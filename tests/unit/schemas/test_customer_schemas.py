"""Tests para los modelos de la API de clientes contra fixtures JSON de Square."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from square_customers.schemas.common import Address, ErrorCategory, SortOrder
from square_customers.schemas.customer_schemas import (
    CreateCustomerRequest,
    Customer,
    CustomerCreationSource,
    CustomerCreationSourceFilter,
    CustomerFilter,
    CustomerInclusionExclusion,
    CustomerQuery,
    CustomerSort,
    CustomerSortField,
    CustomerTextFilter,
    DeleteCustomerParameters,
    FilterValue,
    ListCustomersParameters,
    SearchCustomersRequest,
    SearchCustomersResponse,
    TimeRange,
    UpdateCustomerRequest,
)


class TestCustomerParsing:
    """Parseo de perfiles de cliente."""

    def test_parses_vendor_fixture(self, customer_json):
        customer = Customer.model_validate(customer_json)

        assert customer.id == "JDKYHBWT1D4F8MFH63DBMEN8Y4"
        assert customer.created_at == datetime(2016, 3, 23, 20, 21, 54, 859000, tzinfo=timezone.utc)
        assert customer.creation_source == CustomerCreationSource.THIRD_PARTY
        assert customer.preferences.email_unsubscribed is False
        assert customer.address.administrative_district_level_1 == "NY"
        assert customer.group_ids == ["545AXB44B4XXWMVQ4W8SBT3HHF"]
        assert customer.version == 1

    def test_unknown_fields_are_ignored(self, customer_json):
        customer_json["cards"] = [{"id": "legacy"}]

        customer = Customer.model_validate(customer_json)

        assert not hasattr(customer, "cards")

    def test_models_are_immutable(self, customer_json):
        customer = Customer.model_validate(customer_json)

        with pytest.raises(ValidationError):
            customer.given_name = "Changed"

    def test_serialization_drops_unset_fields(self):
        customer = Customer(id="abc", given_name="Amelia")

        assert customer.to_payload() == {"id": "abc", "given_name": "Amelia"}

    def test_search_response_with_errors_and_customers(self, customer_json):
        payload = {
            "customers": [customer_json],
            "cursor": "9dpS093Uy12AzeE",
            "count": 12,
            "errors": [{"category": "API_ERROR", "code": "INTERNAL_SERVER_ERROR"}],
        }

        response = SearchCustomersResponse.model_validate_json(json.dumps(payload))

        assert response.count == 12
        assert response.errors[0].category is ErrorCategory.API_ERROR
        assert response.customers[0].email_address == "Amelia.Earhart@example.com"


class TestRequestSerialization:
    """Serialización de cuerpos de petición."""

    def test_create_request_matches_vendor_json(self):
        body = CreateCustomerRequest(
            idempotency_key="a4a8e3c4-0f5e-4b9b-9c4a-5c8e0d2f2f1a",
            given_name="Amelia",
            family_name="Earhart",
            email_address="Amelia.Earhart@example.com",
            address=Address(address_line_1="500 Electric Ave", locality="New York", country="US"),
            phone_number="+1-212-555-4240",
        )

        assert body.to_payload() == {
            "idempotency_key": "a4a8e3c4-0f5e-4b9b-9c4a-5c8e0d2f2f1a",
            "given_name": "Amelia",
            "family_name": "Earhart",
            "email_address": "Amelia.Earhart@example.com",
            "address": {"address_line_1": "500 Electric Ave", "locality": "New York", "country": "US"},
            "phone_number": "+1-212-555-4240",
        }

    def test_update_request_keeps_empty_strings_and_version(self):
        body = UpdateCustomerRequest(note="", version=4)

        assert body.to_payload() == {"note": "", "version": 4}

    def test_search_request_nested_query(self):
        body = SearchCustomersRequest(
            limit=2,
            query=CustomerQuery(
                filter=CustomerFilter(
                    creation_source=CustomerCreationSourceFilter(
                        values=[CustomerCreationSource.THIRD_PARTY],
                        rule=CustomerInclusionExclusion.INCLUDE,
                    ),
                    created_at=TimeRange(
                        start_at=datetime(2018, 1, 1, tzinfo=timezone.utc),
                        end_at=datetime(2018, 2, 1, tzinfo=timezone.utc),
                    ),
                    email_address=CustomerTextFilter(fuzzy="example.com"),
                    group_ids=FilterValue(all=["545AXB44B4XXWMVQ4W8SBT3HHF"]),
                ),
                sort=CustomerSort(field=CustomerSortField.CREATED_AT, order=SortOrder.ASC),
            ),
        )

        payload = body.to_payload()
        query = payload["query"]

        assert payload["limit"] == 2
        assert query["filter"]["creation_source"] == {"values": ["THIRD_PARTY"], "rule": "INCLUDE"}
        assert query["filter"]["email_address"] == {"fuzzy": "example.com"}
        assert query["filter"]["group_ids"] == {"all": ["545AXB44B4XXWMVQ4W8SBT3HHF"]}
        assert query["sort"] == {"field": "CREATED_AT", "order": "ASC"}
        assert TimeRange.model_validate(query["filter"]["created_at"]).start_at == datetime(
            2018, 1, 1, tzinfo=timezone.utc
        )


class TestQueryParameters:
    """Renderizado de query strings."""

    def test_empty_parameters_render_nothing(self):
        assert ListCustomersParameters().to_query_string() == ""
        assert DeleteCustomerParameters().to_query_string() == ""

    def test_only_set_fields_are_rendered(self):
        params = ListCustomersParameters(limit=10, sort_order=SortOrder.DESC)

        assert params.to_query_string() == "?limit=10&sort_order=DESC"

    def test_false_boolean_is_rendered(self):
        assert ListCustomersParameters(count=False).to_query_string() == "?count=false"

    def test_cursor_is_url_encoded(self):
        params = ListCustomersParameters(cursor="a+b/c=")

        assert params.to_query_string() == "?cursor=a%2Bb%2Fc%3D"

    def test_delete_version(self):
        assert DeleteCustomerParameters(version=0).to_query_string() == "?version=0"
