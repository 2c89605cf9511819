"""Header-rewriting preprocessor.

Copies an operation's headers into ``MutableHeaders``, applies the
recorded modifications, and rebuilds the operation around the result.
Header names are case-insensitive here because ``MutableHeaders`` is.
"""

from wren.config import PreprocessConfig
from wren.operation import OperationRequest, OperationResponse
from wren.preprocess.modifications import ModificationList
from wren.preprocess.protocol import OperationPreprocessorAdapter


class ModifyHeaders(ModificationList, OperationPreprocessorAdapter):
    """Add, set, and remove request or response headers.

    Usage::

        preprocessor = (
            modify_headers()
            .remove("Authorization")
            .set("Host", "api.example.com")
        )
        documented = preprocessor.preprocess_request(request)
    """

    __slots__ = ()

    def preprocess_request(self, request: OperationRequest) -> OperationRequest:
        headers = self.apply(request.headers.mutable_copy())
        return request.with_headers(headers.freeze())

    def preprocess_response(self, response: OperationResponse) -> OperationResponse:
        headers = self.apply(response.headers.mutable_copy())
        return response.with_headers(headers.freeze())


def modify_headers(config: PreprocessConfig | None = None) -> ModifyHeaders:
    """Start an empty header modification list."""
    return ModifyHeaders(config)
