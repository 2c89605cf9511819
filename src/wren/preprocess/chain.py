"""Run several preprocessors in sequence.

Each preprocessor sees the output of the one before it, the same way
middleware wraps the next handler in order of registration.
"""

from wren.operation import OperationRequest, OperationResponse
from wren.preprocess.protocol import OperationPreprocessor


class PreprocessorChain:
    """Applies preprocessors in the order given.

    Usage::

        chain = PreprocessorChain(
            modify_headers().remove("Date"),
            modify_parameters().remove("access_token"),
        )
        request = chain.preprocess_request(request)
    """

    __slots__ = ("_preprocessors",)

    def __init__(self, *preprocessors: OperationPreprocessor) -> None:
        self._preprocessors = preprocessors

    @property
    def preprocessors(self) -> tuple[OperationPreprocessor, ...]:
        return self._preprocessors

    def preprocess_request(self, request: OperationRequest) -> OperationRequest:
        for preprocessor in self._preprocessors:
            request = preprocessor.preprocess_request(request)
        return request

    def preprocess_response(self, response: OperationResponse) -> OperationResponse:
        for preprocessor in self._preprocessors:
            response = preprocessor.preprocess_response(response)
        return response
