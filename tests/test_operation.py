"""Tests for wren.operation — frozen request/response snapshots."""

import dataclasses

import pytest

from wren.http.headers import Headers
from wren.http.parameters import Parameters
from wren.operation import OperationRequest, OperationResponse


class TestOperationRequest:
    def test_defaults(self) -> None:
        request = OperationRequest(method="GET", uri="/")
        assert request.headers == Headers()
        assert request.parameters == Parameters()
        assert request.content == b""

    def test_with_headers_returns_new(self) -> None:
        request = OperationRequest(method="GET", uri="/")
        updated = request.with_headers(Headers([("A", "1")]))
        assert updated is not request
        assert updated.headers.get("a") == "1"
        assert len(request.headers) == 0

    def test_with_parameters_returns_new(self) -> None:
        request = OperationRequest(method="GET", uri="/")
        updated = request.with_parameters(Parameters([("q", "x")]))
        assert updated.parameters["q"] == "x"
        assert len(request.parameters) == 0

    def test_frozen(self) -> None:
        request = OperationRequest(method="GET", uri="/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            request.method = "POST"  # type: ignore[misc]


class TestOperationResponse:
    def test_defaults(self) -> None:
        response = OperationResponse()
        assert response.status == 200
        assert len(response.headers) == 0

    def test_with_headers_keeps_status(self) -> None:
        response = OperationResponse(status=201).with_headers(Headers([("Location", "/x")]))
        assert response.status == 201
        assert response.headers["location"] == "/x"
