"""Stateless valuation endpoint tests."""

from decimal import Decimal


def test_calculator(client):
    response = client.post(
        "/v1/valuation",
        json={
            "initial_cost": 1000,
            "annual_depreciation_rate": 10,
            "acquisition_date": "2020-01-01",
            "as_of": "2030-01-01",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["elapsed_years"] == 10
    assert Decimal(data["current_value"]) == Decimal("0")


def test_non_numeric_inputs_mean_no_depreciation(client):
    response = client.post(
        "/v1/valuation",
        json={"initial_cost": "1200", "annual_depreciation_rate": "n/a", "acquisition_date": "2010-01-01"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["elapsed_years"] == 0
    assert Decimal(data["total_depreciation"]) == Decimal("0")
    assert Decimal(data["current_value"]) == Decimal("1200")


def test_empty_body(client):
    response = client.post("/v1/valuation", json={})
    assert response.status_code == 200
    assert Decimal(response.json()["current_value"]) == Decimal("0")


def test_unreadable_dates_are_tolerated(client):
    response = client.post(
        "/v1/valuation",
        json={
            "initial_cost": 800,
            "annual_depreciation_rate": 25,
            "acquisition_date": "last spring",
            "as_of": "2024-13-45",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["elapsed_years"] == 0
    assert Decimal(data["current_value"]) == Decimal("800")
    assert data["as_of"] is not None


def test_date_strings_still_parse(client):
    response = client.post(
        "/v1/valuation",
        json={
            "initial_cost": "1000",
            "annual_depreciation_rate": "10",
            "acquisition_date": "2020-01-01",
            "as_of": "2023-01-01",
        },
    )
    data = response.json()
    assert data["elapsed_years"] == 3
    assert data["as_of"] == "2023-01-01"
