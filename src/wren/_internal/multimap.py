"""Multi-valued mapping protocols and the mutable dict behind them.

``MultiValueMapping`` is the read-only shape shared by Headers and
Parameters. ``MutableMultiValueMapping`` is what a modification list
needs to rewrite one. ``MultiValueDict`` implements the mutable side.
"""

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Protocol, Self, runtime_checkable


def _require_values(key: str, values: object) -> None:
    if isinstance(values, str):
        msg = f"values for {key!r} must be a list of str, not a bare str"
        raise TypeError(msg)


@runtime_checkable
class MultiValueMapping(Protocol):
    """A read-only string mapping where keys can have multiple values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.

    Defined with explicit dunder methods because Protocols cannot
    inherit from non-Protocol ABCs like ``Mapping``.
    """

    def __getitem__(self, key: str) -> str: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def get(self, key: str, default: str | None = None) -> str | None: ...
    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class MutableMultiValueMapping(Protocol):
    """A multi-valued mapping that can be rewritten in place.

    ``__setitem__`` replaces every value for a key. ``add`` appends one.
    Iteration must tolerate deleting keys collected beforehand.
    """

    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[str]: ...
    def __len__(self) -> int: ...
    def __setitem__(self, key: str, values: list[str]) -> None: ...
    def __delitem__(self, key: str) -> None: ...
    def add(self, key: str, value: str) -> None: ...
    def get_list(self, key: str) -> list[str]: ...


class MultiValueDict(MutableMapping[str, list[str]]):
    """Mutable, insertion-ordered ``name -> [values]`` mapping.

    Keys keep the spelling they were first stored with. Lookups go
    through ``_fold``, so subclasses can make keys case-insensitive
    without touching anything else.

    Unlike the read-only protocol, ``__getitem__`` here returns the
    full value list (``MutableMapping[str, list[str]]`` semantics).
    Use ``get_first`` for the first value.
    """

    __slots__ = ("_data",)

    def __init__(
        self,
        items: Mapping[str, Iterable[str]] | Iterable[tuple[str, str]] | None = None,
    ) -> None:
        # folded key -> (original key, values)
        self._data: dict[str, tuple[str, list[str]]] = {}
        if items is None:
            return
        if isinstance(items, Mapping):
            for key, values in items.items():
                _require_values(key, values)
                for value in values:
                    self.add(key, value)
        else:
            for key, value in items:
                self.add(key, value)

    def _fold(self, key: str) -> str:
        """Normalise *key* for lookup. Identity by default."""
        return key

    # -- MutableMapping --

    def __getitem__(self, key: str) -> list[str]:
        return self._data[self._fold(key)][1]

    def __setitem__(self, key: str, values: list[str]) -> None:
        folded = self._fold(key)
        existing = self._data.get(folded)
        _require_values(key, values)
        name = existing[0] if existing is not None else key
        self._data[folded] = (name, list(values))

    def __delitem__(self, key: str) -> None:
        del self._data[self._fold(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self._fold(key) in self._data

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._data.values())

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MultiValueDict):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == {k: list(v) for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

    # -- Multi-value helpers --

    def add(self, key: str, value: str) -> None:
        """Append *value* to *key*, creating the entry if needed."""
        folded = self._fold(key)
        existing = self._data.get(folded)
        if existing is None:
            self._data[folded] = (key, [value])
        else:
            existing[1].append(value)

    def get_first(self, key: str, default: str | None = None) -> str | None:
        """Return the first value for *key*, or *default* if missing."""
        entry = self._data.get(self._fold(key))
        if entry is None or not entry[1]:
            return default
        return entry[1][0]

    def get_list(self, key: str) -> list[str]:
        """Return a copy of all values for *key* (empty if missing)."""
        entry = self._data.get(self._fold(key))
        return list(entry[1]) if entry is not None else []

    def items_multi(self) -> Iterator[tuple[str, str]]:
        """Yield every ``(name, value)`` pair in order."""
        for name, values in self._data.values():
            for value in values:
                yield name, value

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain dict snapshot keyed by stored spelling."""
        return {name: list(values) for name, values in self._data.values()}

    def copy(self) -> Self:
        """Return an independent copy; value lists are not shared."""
        clone = type(self)()
        for name, values in self._data.values():
            clone[name] = list(values)
        return clone
