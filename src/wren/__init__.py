"""Wren — rewrite documented HTTP operations before they are rendered.

Records ordered modification lists against multi-valued maps (headers,
request parameters) and replays them on each documented operation.

Basic usage::

    from wren import modify_headers

    preprocessor = (
        modify_headers()
        .remove("Authorization")
        .remove_matching(r"X-Amzn-.*")
        .set("Host", "api.example.com")
    )
    request = preprocessor.preprocess_request(request)
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "Headers",
    "InvalidArgument",
    "ModificationError",
    "ModificationList",
    "ModifyHeaders",
    "ModifyParameters",
    "OperationRequest",
    "OperationResponse",
    "Parameters",
    "PreprocessConfig",
    "PreprocessorChain",
    "WrenError",
    "modify_headers",
    "modify_parameters",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("WrenError", "InvalidArgument", "ModificationError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    if name == "PreprocessConfig":
        from wren.config import PreprocessConfig

        return PreprocessConfig

    if name == "Headers":
        from wren.http.headers import Headers

        return Headers

    if name == "Parameters":
        from wren.http.parameters import Parameters

        return Parameters

    if name in ("OperationRequest", "OperationResponse"):
        from wren import operation as _op

        return getattr(_op, name)

    if name in (
        "ModificationList",
        "ModifyHeaders",
        "ModifyParameters",
        "PreprocessorChain",
        "modify_headers",
        "modify_parameters",
    ):
        from wren import preprocess as _pre

        return getattr(_pre, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
