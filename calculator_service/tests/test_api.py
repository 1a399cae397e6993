"""
Tests del endpoint HTTP
=======================

Verifica el mapeo de `ErrorKind` a códigos de estado y la forma del JSON.
"""

import logging

import pytest

from app.api import routes

URL = "/api/v1/calculate"


@pytest.mark.parametrize("expr,expected", [
    ("2 + 3 * 4", "14.00"),
    ("8 - 3 - 2", "3.00"),
    ("8 / 4 / 2", "1.00"),
    ("(2 + 3) * 4", "20.00"),
    ("12 + 3", "15.00"),
])
def test_calculate_ok(client, expr, expected):
    resp = client.post(URL, json={"expression": expr})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert resp.json() == {"result": expected}


@pytest.mark.parametrize("expr", ["(1 + 2", "1 + @", "1 +", "", "-3 + 2"])
def test_calculate_invalid_expression(client, expr):
    resp = client.post(URL, json={"expression": expr})
    assert resp.status_code == 422
    assert resp.json() == {"error": "Expression is not valid"}


def test_division_by_zero_is_internal_error(client):
    resp = client.post(URL, json={"expression": "5 / 0"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "division" not in resp.text


def test_invalid_json_body(client):
    resp = client.post(URL, content="not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


@pytest.mark.parametrize("body", [{}, {"expr": "1 + 1"}, {"expression": None}])
def test_missing_or_wrong_expression_field(client, body):
    resp = client.post(URL, json=body)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_unexpected_error_does_not_leak(client, monkeypatch):
    class Broken:
        def calculate(self, expression):
            raise RuntimeError("secret internal detail")

    monkeypatch.setattr(routes, "get_calculator_service", lambda: Broken())

    resp = client.post(URL, json={"expression": "1 + 1"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "secret" not in resp.text


def test_handled_request_is_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="app.api.routes"):
        client.post(URL, json={"expression": "2 + 3 * 4"})
    assert any('{"result":"14.00"}' in r.getMessage() for r in caplog.records)


def test_rejected_request_is_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="app.api.routes"):
        client.post(URL, json={"expression": "(1 + 2"})
    assert any("mismatched parentheses" in r.getMessage() for r in caplog.records)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["service"] == "calculator_service"
    assert data["version"]


def test_out_of_range_literal_is_invalid_expression(client):
    resp = client.post(URL, json={"expression": "1e400 + 1"})
    assert resp.status_code == 422
    assert resp.json() == {"error": "Expression is not valid"}


def test_overflowing_result_is_internal_error(client):
    resp = client.post(URL, json={"expression": "1e308 * 10"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}
    assert "inf" not in resp.text
