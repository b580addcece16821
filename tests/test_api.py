"""
Tests for the delivery calculator API.
"""
import os
import sys
import pytest

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from fastapi.testclient import TestClient

from delivery_calc.api.main import app


@pytest.fixture(scope="module")
def client():
    return TestClient(app)


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_settings(client):
    data = client.get("/settings").json()
    assert data["delivery_rate_per_km"] == 1.5
    assert data["tax_rate"] == 0.08
    assert data["free_delivery_threshold"] == 50.0
    assert "project_root" not in data


def test_calculate(client):
    response = client.post("/calculate", json={
        "unit_price": 5, "quantity": 10, "discount_percent": 50, "distance_km": 20,
    })
    assert response.status_code == 200
    data = response.json()
    assert data["breakdown"]["subtotal"] == pytest.approx(50)
    assert data["breakdown"]["delivery_fee"] == pytest.approx(30)
    assert data["breakdown"]["free_delivery_applied"] is False
    assert data["breakdown"]["total"] == pytest.approx(57)
    assert data["lines"][-1] == "Total due: R$ 57.00"


def test_calculate_accepts_form_strings(client):
    response = client.post("/calculate", json={
        "unit_price": "100", "quantity": "1", "discount_percent": "10", "distance_km": "5",
    })
    data = response.json()
    assert data["breakdown"]["free_delivery_applied"] is True
    assert data["breakdown"]["total"] == pytest.approx(97.2)


def test_calculate_lenient_invalid_is_zero(client):
    response = client.post("/calculate", json={"unit_price": "abc", "quantity": 2})
    assert response.status_code == 200
    data = response.json()
    assert data["input"]["unit_price"] == 0
    assert data["breakdown"]["total"] == 0


def test_calculate_strict_invalid_is_rejected(client):
    response = client.post("/calculate?strict=true", json={"unit_price": "abc", "quantity": 2})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "unit_price"


def test_calculate_html(client):
    response = client.post("/calculate/html", json={
        "unit_price": 10, "quantity": 2, "discount_percent": 0, "distance_km": 10,
    })
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<h2>Order Summary</h2>" in response.text
    assert "Total due: R$ 36.60" in response.text


def test_calculate_out_of_range_is_zero(client):
    response = client.post("/calculate", json={
        "unit_price": 10**400, "quantity": 2, "distance_km": "1e400",
    })
    assert response.status_code == 200
    data = response.json()
    assert data["input"]["unit_price"] == 0
    assert data["input"]["distance_km"] == 0
    assert data["breakdown"]["total"] == 0


def test_calculate_strict_out_of_range_is_rejected(client):
    response = client.post("/calculate?strict=true", json={"unit_price": 10, "distance_km": "1e400"})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "distance_km"

    response = client.post("/calculate/html?strict=true", json={"unit_price": 10**400})
    assert response.status_code == 422
    assert response.json()["detail"]["field"] == "unit_price"
