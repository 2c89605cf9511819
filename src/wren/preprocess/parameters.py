"""Parameter-rewriting preprocessor.

Only requests carry parameters; responses pass through untouched.
"""

from wren.config import PreprocessConfig
from wren.operation import OperationRequest
from wren.preprocess.modifications import ModificationList
from wren.preprocess.protocol import OperationPreprocessorAdapter


class ModifyParameters(ModificationList, OperationPreprocessorAdapter):
    """Add, set, and remove request parameters (case-sensitive names)."""

    __slots__ = ()

    def preprocess_request(self, request: OperationRequest) -> OperationRequest:
        parameters = self.apply(request.parameters.mutable_copy())
        return request.with_parameters(parameters.freeze())


def modify_parameters(config: PreprocessConfig | None = None) -> ModifyParameters:
    """Start an empty parameter modification list."""
    return ModifyParameters(config)
