"""Immutable lookup table shared by the key-type and signature catalogs.

A catalog is built once at import time from a sequence of frozen descriptor
records and never changes afterwards, so concurrent reads need no locking.
"""
from __future__ import annotations

from typing import Callable, Dict, Generic, Iterable, Iterator, Tuple, TypeVar

from ..errors import MissingInput, NoSuchElement

T = TypeVar("T")


def require_text(value: str | None, what: str) -> str:
    if value is None:
        raise MissingInput(f"{what} was None")
    if not isinstance(value, str) or not value.strip():
        raise MissingInput(f"{what} was blank")
    return value


class Catalog(Generic[T]):
    """Ordered, read-only table of descriptors keyed by ``id``.

    ``unique`` names extra attribute tuples that must not repeat across entries;
    a violation raises ``ValueError`` while the table is being built.
    """

    def __init__(self, kind: str, entries: Iterable[T], unique: Callable[[T], tuple] | None = None):
        self._kind = kind
        self._entries: Tuple[T, ...] = tuple(entries)
        self._by_id: Dict[str, T] = {}
        seen: Dict[tuple, str] = {}
        for entry in self._entries:
            ident = getattr(entry, "id")
            if ident in self._by_id:
                raise ValueError(f"duplicate {kind} id {ident!r}")
            self._by_id[ident] = entry
            if unique is not None:
                key = unique(entry)
                if key in seen:
                    raise ValueError(f"{kind} {ident!r} duplicates {seen[key]!r}")
                seen[key] = ident

    @property
    def kind(self) -> str:
        return self._kind

    def all(self) -> Tuple[T, ...]:
        return self._entries

    def __iter__(self) -> Iterator[T]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        return any(item is e or item == e for e in self._entries)

    def index(self, entry: T) -> int:
        return self._entries.index(entry)

    def find_by_id(self, ident: str | None) -> T:
        require_text(ident, f"{self._kind} id")
        try:
            return self._by_id[ident]  # type: ignore[index]
        except KeyError:
            raise NoSuchElement(f"no {self._kind} with id {ident!r}") from None

    def find_by(self, attr: str, value: str | None) -> T:
        """Return the first entry whose ``attr`` equals ``value`` exactly."""
        require_text(value, f"{self._kind} {attr}")
        for entry in self._entries:
            if getattr(entry, attr) == value:
                return entry
        raise NoSuchElement(f"no {self._kind} with {attr} {value!r}")

    def __repr__(self) -> str:
        return f"Catalog({self._kind!r}, {len(self._entries)} entries)"


__all__ = ["Catalog", "require_text"]
