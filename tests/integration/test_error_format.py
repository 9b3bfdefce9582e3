"""Integration tests for standardized error responses."""

from unittest.mock import patch

import pytest

from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestStandardizedErrors:
    def test_validation_error_has_standard_format(self, api_client):
        response = api_client.post("/api/products", {"name": ""}, format="json")
        assert response.status_code == 400
        assert response.json() == {"error": "Product name cannot be null or empty"}

    def test_malformed_json_has_standard_format(self, api_client):
        response = api_client.post(
            "/api/products", data="{", content_type="application/json"
        )
        assert response.status_code == 400
        data = response.json()
        assert list(data) == ["error"]
        assert "JSON parse error" in data["error"]

    def test_non_string_name_has_standard_format(self, api_client):
        response = api_client.post("/api/products", {"name": 42}, format="json")
        assert response.status_code == 400
        data = response.json()
        assert list(data) == ["error"]
        assert data["error"].startswith("name:")

    def test_non_object_body_has_standard_format(self, api_client):
        response = api_client.post("/api/products", ["Widget"], format="json")
        assert response.status_code == 400
        assert list(response.json()) == ["error"]
        assert Product.objects.count() == 0

    def test_unsupported_media_type_has_standard_format(self, api_client):
        response = api_client.post("/api/products", {"name": "Widget"})
        assert response.status_code == 415
        assert list(response.json()) == ["error"]

    def test_method_not_allowed_has_standard_format(self, api_client):
        response = api_client.delete("/api/products")
        assert response.status_code == 405
        assert response.json() == {"error": 'Method "DELETE" not allowed.'}

    def test_store_failures_are_not_translated(self, api_client):
        api_client.raise_request_exception = False
        with patch(
            "modules.products.repositories.django_repository.ProductDjangoRepository.save",
            side_effect=RuntimeError("store unavailable"),
        ):
            response = api_client.post(
                "/api/products", {"name": "Widget"}, format="json"
            )
        assert response.status_code == 500
