"""Tests for the @validate_request decorator."""

import pytest
from flask import Blueprint, Flask, jsonify
from pydantic import BaseModel, Field

from kvault.api.validation import validate_request
from kvault.exceptions import KVaultError
from kvault.main import handle_kvault_error


# Test Pydantic schemas
class MockCreateRequest(BaseModel):
    """Test schema for request body validation."""
    name: str = Field(..., description="Name field")
    amount: float = Field(..., description="Amount field")
    category: str | None = Field(default=None, description="Optional category")


class MockUpdateRequest(BaseModel):
    """Test schema with all optional fields."""
    name: str | None = None
    amount: float | None = None


test_validation_bp = Blueprint('validation_test_routes', __name__)


@test_validation_bp.post("/test/valid")
@validate_request
def route_valid(data: MockCreateRequest):
    return jsonify({
        "name": data.name,
        "amount": data.amount,
        "category": data.category
    }), 200


@test_validation_bp.put("/test/combined/<item_id>")
@validate_request
def route_combined(item_id: str, data: MockUpdateRequest):
    return jsonify({
        "item_id": item_id,
        "name": data.name,
        "amount": data.amount
    }), 200


@pytest.fixture
def validation_client():
    """Create test client with validation test routes."""
    app = Flask(__name__)
    app.config['TESTING'] = True
    app.register_error_handler(KVaultError, handle_kvault_error)
    app.register_blueprint(test_validation_bp)
    with app.test_client() as client:
        yield client


class TestValidateRequest:

    def test_valid_body(self, validation_client):
        response = validation_client.post(
            "/test/valid", json={"name": "widget", "amount": 2.5}
        )
        assert response.status_code == 200
        assert response.get_json() == {"name": "widget", "amount": 2.5, "category": None}

    def test_missing_required_field(self, validation_client):
        response = validation_client.post("/test/valid", json={"name": "widget"})
        assert response.status_code == 400

        data = response.get_json()
        assert data["code"] == "INVALID_REQUEST"
        assert data["message"] == "Invalid request data"
        assert any(err["loc"] == ["amount"] for err in data["details"]["errors"])

    def test_wrong_type(self, validation_client):
        response = validation_client.post(
            "/test/valid", json={"name": "widget", "amount": "lots"}
        )
        assert response.status_code == 400

    def test_missing_body_treated_as_empty(self, validation_client):
        response = validation_client.put("/test/combined/abc")
        assert response.status_code == 200
        assert response.get_json() == {"item_id": "abc", "name": None, "amount": None}

    def test_non_json_body_treated_as_empty(self, validation_client):
        response = validation_client.put(
            "/test/combined/abc", data="name=x", content_type="text/plain"
        )
        assert response.status_code == 200
        assert response.get_json()["name"] is None

    def test_path_and_body_combined(self, validation_client):
        response = validation_client.put(
            "/test/combined/abc", json={"name": "renamed"}
        )
        assert response.status_code == 200
        assert response.get_json() == {"item_id": "abc", "name": "renamed", "amount": None}

    def test_array_body_rejected(self, validation_client):
        response = validation_client.post("/test/valid", json=[1, 2])
        assert response.status_code == 400
        assert response.get_json()["code"] == "INVALID_REQUEST"


def test_view_without_schema_rejected():
    with pytest.raises(TypeError):
        @validate_request
        def no_schema(item_id: str):
            return ""
