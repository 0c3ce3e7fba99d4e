"""
Field Endpoint Tests

Test suite for the template and schema field discovery endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from atomic_offchain import DEFAULT_FIELDS
from fields_api.tests.assertions import (
    assert_error_response,
    assert_schema_fields_equal,
    assert_successful_response,
)


@pytest.mark.api
class TestTemplateFieldsEndpoint:
    """Tests for GET /api/v1/collections/{collection_name}/templates"""

    def test_list_template_fields_default_fields(self, client: TestClient):
        """Test scanning with the configured default field list"""
        response = client.get("/api/v1/collections/sample/templates")
        data = assert_successful_response(response, ["collection_name", "fields_checked", "schemas"])

        assert data["collection_name"] == "sample"
        assert data["fields_checked"] == DEFAULT_FIELDS
        assert data["schemas"] == {"S1": {"T1": ["timestamp"], "T2": ["year", "nation"]}}

    def test_list_template_fields_keeps_requested_order(self, client: TestClient):
        """Test that found fields follow the order of the requested fields"""
        response = client.get(
            "/api/v1/collections/sample/templates", params={"fields": ["year", "nation", "name"]}
        )
        data = assert_successful_response(response)

        assert data["fields_checked"] == ["year", "nation", "name"]
        assert data["schemas"] == {
            "S1": {"T1": ["name"], "T2": ["year", "nation"]},
            "S2": {"T3": ["name"]},
        }

    def test_list_template_fields_no_match(self, client: TestClient):
        """Test that a scan without matches returns an empty mapping"""
        response = client.get("/api/v1/collections/sample/templates", params={"fields": ["geotag"]})
        data = assert_successful_response(response)

        assert data["schemas"] == {}

    def test_list_template_fields_unknown_collection(self, client: TestClient):
        """Test that a collection without schemas is reported as not found"""
        response = client.get("/api/v1/collections/unknown/templates")
        assert_error_response(response, 404, "schemas not found")

    def test_list_template_fields_explorer_down(self, client: TestClient, explorer):
        """Test that explorer failures map to 502"""
        explorer.fail_with("connection refused")

        response = client.get("/api/v1/collections/sample/templates")
        assert_error_response(response, 502, "connection refused")


@pytest.mark.api
class TestSchemaFieldsEndpoint:
    """Tests for GET /api/v1/collections/{collection_name}/schemas"""

    def test_list_schema_fields(self, client: TestClient):
        """Test aggregating template fields per schema"""
        response = client.get("/api/v1/collections/sample/schemas")
        data = assert_successful_response(response, ["collection_name", "fields_checked", "schemas"])

        assert_schema_fields_equal(data["schemas"], {"S1": ["timestamp", "nation", "year"]})

    def test_list_schema_fields_custom_fields(self, client: TestClient):
        """Test that every listed schema has at least one field"""
        response = client.get("/api/v1/collections/sample/schemas", params={"fields": ["name", "year"]})
        data = assert_successful_response(response)

        assert_schema_fields_equal(data["schemas"], {"S1": ["name", "year"], "S2": ["name"]})
        for fields in data["schemas"].values():
            assert fields, "Schemas without fields must not be listed"

    def test_list_schema_fields_unknown_collection(self, client: TestClient):
        """Test aggregation over a collection without schemas"""
        response = client.get("/api/v1/collections/unknown/schemas")
        assert_error_response(response, 404)


@pytest.mark.api
class TestApiKey:
    """Tests for the optional x-api-key guard"""

    def test_open_when_no_key_configured(self, client: TestClient):
        response = client.get("/api/v1/collections/sample/schemas")
        assert response.status_code == 200

    def test_missing_key_rejected(self, client: TestClient, api_key):
        response = client.get("/api/v1/collections/sample/schemas")
        assert_error_response(response, 401, "API Key")

    def test_invalid_key_rejected(self, client: TestClient, api_key):
        response = client.get("/api/v1/collections/sample/schemas", headers={"X-API-Key": "invalid_key_12345"})
        assert_error_response(response, 401)

    def test_valid_key_accepted(self, client: TestClient, auth_headers):
        response = client.get("/api/v1/collections/sample/schemas", headers=auth_headers)
        assert_successful_response(response)


@pytest.mark.api
class TestHealthEndpoint:
    """Tests for GET /health"""

    def test_health(self, client: TestClient):
        response = client.get("/health")
        data = assert_successful_response(response, ["status", "api_version", "explorer"])

        assert data["status"] == "healthy"
        assert data["explorer"]["initialized"] is True
