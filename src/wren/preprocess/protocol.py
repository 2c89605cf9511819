"""Preprocessor protocol and pass-through base.

A preprocessor is any object with ``preprocess_request`` and
``preprocess_response``. No base class required; the adapter exists
for preprocessors that only care about one side.
"""

from typing import Protocol, runtime_checkable

from wren.operation import OperationRequest, OperationResponse


@runtime_checkable
class OperationPreprocessor(Protocol):
    """Protocol for request/response preprocessors::

        class StripBody:
            def preprocess_request(self, request):
                return replace(request, content=b"")

            def preprocess_response(self, response):
                return replace(response, content=b"")
    """

    def preprocess_request(self, request: OperationRequest) -> OperationRequest: ...
    def preprocess_response(self, response: OperationResponse) -> OperationResponse: ...


class OperationPreprocessorAdapter:
    """Returns requests and responses unchanged. Override one side."""

    __slots__ = ()

    def preprocess_request(self, request: OperationRequest) -> OperationRequest:
        return request

    def preprocess_response(self, response: OperationResponse) -> OperationResponse:
        return response
