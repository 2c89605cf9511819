"""Preprocessing configuration.

PreprocessConfig is a frozen dataclass — immutable after creation,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PreprocessConfig:
    """How a modification list behaves when applied. Immutable after creation.

    Defaults are tolerant. Override what you need::

        config = PreprocessConfig(strict=True)
    """

    # Raise ModificationError instead of skipping removals that match nothing
    strict: bool = False
