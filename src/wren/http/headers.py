"""Immutable, case-insensitive HTTP headers and their mutable copy.

``Headers`` implements ``Mapping[str, str]`` and the ``MultiValueMapping``
protocol. ``MutableHeaders`` is the writable copy a modification list
is applied to; ``freeze()`` turns it back into ``Headers``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from wren._internal.multimap import MultiValueDict


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    Names keep the spelling they were given; iteration yields each
    distinct name once, in first-seen order.
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, str]] = ()) -> None:
        object.__setattr__(self, "_pairs", tuple(pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> Headers:
        """Build from ``{name: [values]}``, keeping value order."""
        return cls((name, value) for name, values in mapping.items() for value in values)

    def __getitem__(self, key: str) -> str:
        key_lower = key.lower()
        for name, value in self._pairs:
            if name.lower() == key_lower:
                return value
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = key.lower()
        return any(name.lower() == key_lower for name, _ in self._pairs)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._pairs:
            folded = name.lower()
            if folded not in seen:
                seen.add(folded)
                yield name

    def __len__(self) -> int:
        return len({name.lower() for name, _ in self._pairs})

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Headers):
            return self._folded() == other._folded()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._folded())

    def _folded(self) -> tuple[tuple[str, str], ...]:
        return tuple((name.lower(), value) for name, value in self._pairs)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self.get_list(k)!r}" for k in self)
        return f"Headers({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (e.g. multiple ``Set-Cookie``)."""
        key_lower = key.lower()
        return [value for name, value in self._pairs if name.lower() == key_lower]

    @property
    def pairs(self) -> tuple[tuple[str, str], ...]:
        """Raw ``(name, value)`` pairs in received order."""
        return self._pairs

    def mutable_copy(self) -> MutableHeaders:
        """Return a writable copy grouped by header name."""
        return MutableHeaders(self._pairs)


class MutableHeaders(MultiValueDict):
    """Writable, case-insensitive headers.

    Lookups ignore case; the first spelling stored for a name is kept
    when values are added or replaced under another spelling.
    """

    __slots__ = ()

    def _fold(self, key: str) -> str:
        return key.lower()

    def freeze(self) -> Headers:
        """Return an immutable ``Headers`` with the current contents."""
        return Headers(self.items_multi())
