from __future__ import annotations
import typing
from ..iterables import JoinSequence, ZipSequence
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class JoinAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def join_by(self, inner: Iterable[U], predicate: Callable[[T, U], bool]) -> 'Query[Tuple[T, U]]':
        """
        pair every element with each element of 'inner' the predicate accepts.
        nested-loop semantics: 'inner' is read in full for each cursor.
        """
        from ..query import Query
        return Query(JoinSequence(self._query._source, inner, predicate))

    def zip_with(self, other: Iterable[U],
                 result_selector: Optional[Callable[[T, U], V]] = None) -> 'Query[V]':
        """zip two sequences with a result selector, stopping at the shorter one"""
        from ..query import Query
        combine = result_selector if result_selector else lambda t, u: (t, u)
        return Query(ZipSequence(self._query._source, other, combine))
