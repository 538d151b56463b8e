"""Tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from text_transform import __version__
from text_transform.api import create_app
from text_transform.config import Settings
from text_transform.functions import FunctionRegistry
from text_transform.runner import Toolkit


@pytest.fixture
def client(toolkit):
    return TestClient(create_app(toolkit=toolkit, settings=Settings()))


class TestHealth:
    """Test the health endpoint."""

    def test_health(self, client):
        """Test status, version and catalog counts."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == __version__
        assert data["stats"] == {"total_tools": 105, "categories": 8}
        assert data["endpoints"]["transform"] == "/api/transform/{category}/{tool}"


class TestCatalogEndpoints:
    """Test listing and describing tools."""

    def test_list_all(self, client):
        """Test the full listing."""
        response = client.get("/api/tools")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["error"] is None
        assert body["meta"]["version"] == __version__
        data = body["data"]
        assert data["total_tools"] == 105
        assert len(data["categories"]) == 8
        assert data["categories"][0]["endpoint"] == "/api/tools?category=naming-conventions"
        assert len(data["tools"]) == 105

    def test_list_category(self, client):
        """Test filtering by category slug."""
        response = client.get("/api/tools", params={"category": "ciphers"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["category"] == "ciphers"
        rot13 = next(tool for tool in data["tools"] if tool["id"] == "rot13")
        assert rot13["endpoint"] == "/api/transform/ciphers/rot13"
        assert rot13["options"] == []

    def test_list_unknown_category(self, client):
        """Test an unknown category is a 404 envelope."""
        response = client.get("/api/tools", params={"category": "nope"})
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"]["code"] == "NOT_FOUND"
        assert body["error"]["message"] == "Category 'nope' not found"

    def test_describe(self, client):
        """Test tool description with an example request."""
        response = client.get("/api/transform/ciphers/caesar-encode")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["method"] == "POST"
        assert data["options"][0]["key"] == "shift"
        assert data["options"][0]["required"] is False
        assert data["example"]["request"] == {"options": {"shift": 3}, "input": "Hello"}

    def test_describe_generator(self, client):
        """Test generator examples carry no input."""
        data = client.get("/api/transform/crypto/generate-uuid-v4").json()["data"]
        assert data["is_generator"] is True
        assert "input" not in data["example"]["request"]

    def test_unknown_route(self, client):
        """Test unknown routes use the envelope."""
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestTransformEndpoint:
    """Test running tools over HTTP."""

    def test_transform(self, client):
        """Test a successful transformation."""
        response = client.post("/api/transform/ciphers/rot13", json={"input": "Hello"})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data == {
            "tool": "ROT13",
            "category": "ciphers",
            "input": "Hello",
            "output": "Uryyb",
            "options": None,
        }

    def test_transform_with_options(self, client):
        """Test options reach the tool."""
        response = client.post(
            "/api/transform/ciphers/caesar-encode",
            json={"input": "abc", "options": {"shift": 1}},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["output"] == "bcd"
        assert data["options"] == {"shift": 1}

    def test_async_tool(self, client):
        """Test async tools are awaited."""
        response = client.post("/api/transform/crypto/md5-hash", json={"input": "hello"})
        assert response.json()["data"]["output"] == "5d41402abc4b2a76b9719d911017c592"

    def test_generator_without_body(self, client):
        """Test generators accept an empty request."""
        response = client.post("/api/transform/crypto/generate-uuid-v4")
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["output"]) == 36
        assert data["input"] is None

    def test_missing_input(self, client):
        """Test non-generators require input."""
        response = client.post("/api/transform/ciphers/rot13", json={})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Input text is required"
        assert error["details"] == {"field": "input"}

    def test_missing_required_option(self, client):
        """Test required options are enforced."""
        response = client.post("/api/transform/crypto/generate-hmac-sha256", json={"input": "msg"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Parameter 'key' is required: Secret key"

    def test_input_too_large(self, toolkit):
        """Test the configured size limit is enforced."""
        client = TestClient(create_app(toolkit=toolkit, settings=Settings(max_input_size=5)))
        response = client.post("/api/transform/ciphers/rot13", json={"input": "abcdefgh"})
        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert "maximum size of 5 characters" in error["message"]

    def test_invalid_body(self, client):
        """Test malformed bodies are rejected."""
        response = client.post("/api/transform/ciphers/rot13", json={"input": ["not", "text"]})
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_unknown_tool(self, client):
        """Test unknown tools are a 404."""
        response = client.post("/api/transform/ciphers/nope", json={"input": "x"})
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_unavailable_tool(self, toolkit):
        """Test tools whose function is missing are a 503."""
        broken = Toolkit(tools=toolkit.tools, functions=FunctionRegistry())
        client = TestClient(create_app(toolkit=broken, settings=Settings()))
        response = client.post("/api/transform/ciphers/rot13", json={"input": "x"})
        assert response.status_code == 503
        assert response.json()["error"]["code"] == "TOOL_UNAVAILABLE"

    def test_wrong_method(self, client):
        """Test unsupported methods use the envelope."""
        response = client.delete("/api/transform/ciphers/rot13")
        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
