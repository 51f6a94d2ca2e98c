import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    def test_schema_lists_order_paths(self, api_client):
        response = api_client.get(
            "/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json"
        )
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert set(paths["/orders"]) >= {"get", "post"}
        assert set(paths["/orders/{id}"]) >= {"get", "put"}
