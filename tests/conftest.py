"""Shared pytest fixtures for wren tests."""

from collections.abc import Callable

import pytest

from wren.http.headers import Headers, MutableHeaders
from wren.http.parameters import Parameters
from wren.operation import OperationRequest, OperationResponse
from wren.preprocess.modifications import ModificationList

type Pairs = tuple[tuple[str, str], ...]


@pytest.fixture
def modifications() -> ModificationList:
    """A fresh, tolerant modification list."""
    return ModificationList()


@pytest.fixture
def fruit_headers() -> MutableHeaders:
    """Four single-valued headers, three of them starting with ``a``."""
    return MutableHeaders(
        [("apple", "apple"), ("alpha", "alpha"), ("avocado", "avocado"), ("bravo", "bravo")]
    )


@pytest.fixture
def make_request() -> Callable[..., OperationRequest]:
    """Build a GET OperationRequest from header and parameter pairs."""

    def _make(headers: Pairs = (), parameters: Pairs = ()) -> OperationRequest:
        return OperationRequest(
            method="GET",
            uri="http://localhost:8080",
            headers=Headers(headers),
            parameters=Parameters(parameters),
        )

    return _make


@pytest.fixture
def make_response() -> Callable[..., OperationResponse]:
    """Build a 200 OperationResponse from header pairs."""

    def _make(headers: Pairs = ()) -> OperationResponse:
        return OperationResponse(status=200, headers=Headers(headers), content=b"{}")

    return _make
