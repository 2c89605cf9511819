"""Ordered modification lists for multi-valued maps.

A ``ModificationList`` records add/set/remove operations through a
chainable builder and replays them, in the order they were recorded,
against a ``MutableMultiValueMapping``::

    mods = (
        ModificationList()
        .remove("Authorization")
        .remove_matching(r"X-Internal-.*")
        .set("Host", "api.example.com")
        .add("Accept", "application/json")
    )
    mods.apply(headers)

Removals of things that are not there are skipped unless the list was
built with ``PreprocessConfig(strict=True)``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Self

from wren._internal.multimap import MutableMultiValueMapping
from wren.config import PreprocessConfig
from wren.errors import InvalidArgument, ModificationError

logger = logging.getLogger("wren.preprocess")


# -- Modifications --


@dataclass(frozen=True, slots=True)
class Add:
    """Append ``value`` to ``name``."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"add {self.name!r}={self.value!r}"


@dataclass(frozen=True, slots=True)
class Set:
    """Replace every value of ``name`` with ``values``."""

    name: str
    values: tuple[str, ...]

    def __str__(self) -> str:
        return f"set {self.name!r}={list(self.values)!r}"


@dataclass(frozen=True, slots=True)
class Remove:
    """Drop ``name`` entirely."""

    name: str

    def __str__(self) -> str:
        return f"remove {self.name!r}"


@dataclass(frozen=True, slots=True)
class RemovePattern:
    """Drop every name that fully matches ``pattern``."""

    pattern: re.Pattern[str]

    def __str__(self) -> str:
        return f"remove matching {self.pattern.pattern!r}"


@dataclass(frozen=True, slots=True)
class RemoveValue:
    """Drop one occurrence of ``value`` from ``name``."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"remove {self.name!r}={self.value!r}"


type Modification = Add | Set | Remove | RemovePattern | RemoveValue


def _require_str(label: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"{label} must be a str, got {type(value).__name__}"
        raise InvalidArgument(msg)
    return value


# -- Builder --


class ModificationList:
    """An ordered, reusable list of modifications to a multi-valued map.

    Builder methods append one modification and return ``self``. Nothing
    touches a map until ``apply()``; applying never changes the list, so
    one list can be applied to any number of maps.

    Not safe to build from several threads at once. Once built, it can be
    applied concurrently as long as each call gets its own target map.
    """

    __slots__ = ("_config", "_modifications")

    def __init__(self, config: PreprocessConfig | None = None) -> None:
        self._config = config or PreprocessConfig()
        self._modifications: list[Modification] = []

    # -- Building --

    def add(self, name: str, value: str) -> Self:
        """Append *value* to *name*, creating the entry if it is absent."""
        self._modifications.append(
            Add(_require_str("name", name), _require_str("value", value))
        )
        return self

    def set(self, name: str, *values: str | Iterable[str]) -> Self:
        """Replace every value of *name* with *values*, in the given order.

        Accepts values positionally (``set("a", "x", "y")``) or as one
        iterable (``set("a", ["x", "y"])``).

        Raises:
            InvalidArgument: If no values are given.
        """
        _require_str("name", name)
        if len(values) == 1 and not isinstance(values[0], str):
            if not isinstance(values[0], Iterable):
                _require_str("value", values[0])
            values = tuple(values[0])
        if not values:
            msg = f"At least one value must be provided for {name!r}"
            raise InvalidArgument(msg)
        self._modifications.append(
            Set(name, tuple(_require_str("value", v) for v in values))
        )
        return self

    def remove(self, name: str) -> Self:
        """Drop *name* and all of its values."""
        self._modifications.append(Remove(_require_str("name", name)))
        return self

    def remove_matching(self, pattern: str | re.Pattern[str]) -> Self:
        """Drop every name the pattern matches in full.

        ``"X-.*"`` removes ``X-Trace`` but not ``Accept-X-Trace``; a
        partial match is not enough.
        """
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        elif not isinstance(pattern, re.Pattern):
            msg = f"pattern must be a str or re.Pattern, got {type(pattern).__name__}"
            raise InvalidArgument(msg)
        self._modifications.append(RemovePattern(pattern))
        return self

    def remove_value(self, name: str, value: str) -> Self:
        """Drop the first occurrence of *value* from *name*.

        The entry is removed altogether once its last value is gone.
        """
        self._modifications.append(
            RemoveValue(_require_str("name", name), _require_str("value", value))
        )
        return self

    # -- Introspection --

    @property
    def config(self) -> PreprocessConfig:
        return self._config

    @property
    def modifications(self) -> tuple[Modification, ...]:
        """Recorded modifications, in application order."""
        return tuple(self._modifications)

    def __iter__(self) -> Iterator[Modification]:
        return iter(self.modifications)

    def __len__(self) -> int:
        return len(self._modifications)

    def __repr__(self) -> str:
        steps = ", ".join(str(m) for m in self._modifications)
        return f"{type(self).__name__}([{steps}])"

    # -- Applying --

    def apply[M: MutableMultiValueMapping](self, target: M) -> M:
        """Run every modification against *target*, in order.

        *target* is changed in place and returned.

        Raises:
            ModificationError: In strict mode, when a removal matches nothing.
        """
        for modification in self._modifications:
            self._apply_one(modification, target)
        logger.debug(
            "Applied %d modification(s) to %s",
            len(self._modifications),
            type(target).__name__,
        )
        return target

    def _apply_one(self, modification: Modification, target: MutableMultiValueMapping) -> None:
        match modification:
            case Add(name, value):
                target.add(name, value)
            case Set(name, values):
                target[name] = list(values)
            case Remove(name):
                if name in target:
                    del target[name]
                else:
                    self._skip(modification, f"no entry named {name!r}")
            case RemovePattern(pattern):
                matched = [key for key in target if pattern.fullmatch(key)]
                for key in matched:
                    del target[key]
                if not matched:
                    self._skip(modification, "no names matched")
            case RemoveValue(name, value):
                values = target.get_list(name)
                if value not in values:
                    self._skip(modification, f"{value!r} not present under {name!r}")
                    return
                values.remove(value)
                if values:
                    target[name] = values
                else:
                    del target[name]

    def _skip(self, modification: Modification, detail: str) -> None:
        if self._config.strict:
            raise ModificationError(modification, detail)
        logger.debug("Skipped %s: %s", modification, detail)
