"""Documented HTTP operations — request and response snapshots.

Both are frozen. Preprocessors never mutate them; each ``.with_*()``
call returns a new instance, the same way a chainable response is built.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from wren.http.headers import Headers
from wren.http.parameters import Parameters


@dataclass(frozen=True, slots=True)
class OperationRequest:
    """A request captured for documentation."""

    method: str
    uri: str
    headers: Headers = field(default_factory=Headers)
    parameters: Parameters = field(default_factory=Parameters)
    content: bytes = b""

    def with_headers(self, headers: Headers) -> OperationRequest:
        """Return a new request with *headers* in place of the current ones."""
        return replace(self, headers=headers)

    def with_parameters(self, parameters: Parameters) -> OperationRequest:
        """Return a new request with *parameters* in place of the current ones."""
        return replace(self, parameters=parameters)


@dataclass(frozen=True, slots=True)
class OperationResponse:
    """A response captured for documentation."""

    status: int = 200
    headers: Headers = field(default_factory=Headers)
    content: bytes = b""

    def with_headers(self, headers: Headers) -> OperationResponse:
        """Return a new response with *headers* in place of the current ones."""
        return replace(self, headers=headers)
