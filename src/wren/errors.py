"""Wren exception hierarchy.

Shared across the builder, the maps, and the preprocessors so every
module raises and catches the same types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.preprocess.modifications import Modification


class WrenError(Exception):
    """Base for all wren-specific errors."""


class InvalidArgument(WrenError, ValueError):  # noqa: N818 — mirrors the builtin naming
    """Raised while building a modification list with bad input.

    Always raised synchronously by the builder method that received the
    argument, never deferred to ``apply()``.
    """


class ModificationError(WrenError):
    """A modification could not be applied in strict mode.

    Tolerant lists (the default) skip these cases silently.
    """

    def __init__(self, modification: Modification, detail: str) -> None:
        self.modification = modification
        self.detail = detail
        super().__init__(f"{modification}: {detail}")
