from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, ArrayQuery


class _Seen:
    """
    equality-based membership. hashable values go through a set; anything
    unhashable falls back to a linear scan, so mixed sequences still work.
    """

    def __init__(self, items: Iterable[Any] = ()):
        self._hashed = set()
        self._unhashable = []
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)

    def __contains__(self, item: Any) -> bool:
        try:
            if item in self._hashed:
                return True
        except TypeError:
            pass
        return item in self._unhashable


class SetAccessor(Generic[T]):
    """
    equality-based set operations. all of them are eager and hand back an
    array-backed query; order always follows the left (this) sequence first.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def distinct(self) -> 'ArrayQuery[T]':
        """return distinct elements. preserves order of first appearance."""
        return self.distinct_by(lambda item: item)

    def distinct_by(self, key_selector: KeySelector[T, K]) -> 'ArrayQuery[T]':
        """keep the first element for each distinct key"""
        from ..query import ArrayQuery
        seen, result = _Seen(), []
        for item in self._query:
            key = key_selector(item)
            if key not in seen:
                seen.add(key)
                result.append(item)
        return ArrayQuery(result)

    def union(self, other: Iterable[T]) -> 'ArrayQuery[T]':
        """all elements of this sequence, then the elements of 'other' not yet present."""
        from ..query import ArrayQuery
        result = list(self._query)
        seen = _Seen(result)
        for item in other:
            if item not in seen:
                seen.add(item)
                result.append(item)
        return ArrayQuery(result)

    def except_(self, other: Iterable[T]) -> 'ArrayQuery[T]':
        """return elements from this sequence not in 'other' (set difference)."""
        from ..query import ArrayQuery
        excluded = _Seen(other)
        return ArrayQuery([item for item in self._query if item not in excluded])

    def intersect(self, other: Iterable[T]) -> 'ArrayQuery[T]':
        """return elements from this sequence that also occur in 'other'."""
        from ..query import ArrayQuery
        included = _Seen(other)
        return ArrayQuery([item for item in self._query if item in included])
