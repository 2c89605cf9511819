"""Immutable request parameters and their mutable copy.

``Parameters`` implements ``Mapping[str, str]`` and the ``MultiValueMapping``
protocol. Names are case-sensitive.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from urllib.parse import parse_qsl, quote

from wren._internal.multimap import MultiValueDict


class Parameters(Mapping[str, str]):
    """Immutable request parameters.

    Attributes:
        _data: Parameter name -> list of values, in first-seen order.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, tuple[str, ...]]

    __slots__ = ("_data",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        grouped: dict[str, list[str]] = {}
        for name, value in pairs:
            grouped.setdefault(name, []).append(value)
        object.__setattr__(self, "_data", {k: tuple(v) for k, v in grouped.items()})

    @classmethod
    def from_query_string(cls, query_string: str) -> Parameters:
        """Parse ``a=1&b=2&a=3``. Blank values are kept."""
        return cls(parse_qsl(query_string, keep_blank_values=True))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> Parameters:
        """Build from ``{name: [values]}``, keeping value order."""
        return cls((name, value) for name, values in mapping.items() for value in values)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Parameters):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self._data.items())
        return f"Parameters({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, ()))

    def to_query_string(self) -> str:
        """Render as a URL-encoded query string, e.g. ``a=alpha&b=bravo%20two``."""
        return "&".join(
            f"{quote(name, safe='')}={quote(value, safe='')}"
            for name, values in self._data.items()
            for value in values
        )

    def mutable_copy(self) -> MutableParameters:
        """Return a writable copy."""
        return MutableParameters({k: list(v) for k, v in self._data.items()})


class MutableParameters(MultiValueDict):
    """Writable, case-sensitive request parameters."""

    __slots__ = ()

    def freeze(self) -> Parameters:
        """Return an immutable ``Parameters`` with the current contents."""
        return Parameters(self.items_multi())
