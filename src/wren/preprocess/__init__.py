"""Preprocessing — rewrite documented operations before rendering.

Built-in preprocessors:
    ModifyHeaders -- add, set, and remove request/response headers
    ModifyParameters -- add, set, and remove request parameters
    PreprocessorChain -- run several preprocessors in order
"""

from wren.preprocess.chain import PreprocessorChain
from wren.preprocess.headers import ModifyHeaders, modify_headers
from wren.preprocess.modifications import (
    Add,
    Modification,
    ModificationList,
    Remove,
    RemovePattern,
    RemoveValue,
    Set,
)
from wren.preprocess.parameters import ModifyParameters, modify_parameters
from wren.preprocess.protocol import OperationPreprocessor, OperationPreprocessorAdapter

__all__ = [
    "Add",
    "Modification",
    "ModificationList",
    "ModifyHeaders",
    "ModifyParameters",
    "OperationPreprocessor",
    "OperationPreprocessorAdapter",
    "PreprocessorChain",
    "Remove",
    "RemovePattern",
    "RemoveValue",
    "Set",
    "modify_headers",
    "modify_parameters",
]
