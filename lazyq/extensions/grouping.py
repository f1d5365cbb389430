from __future__ import annotations
import typing
from ..iterables import ChunkSequence, WindowSequence
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class GroupingAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key. keys keep first-occurrence order, members keep source order"""
        groups = {}
        for item in self._query:
            groups.setdefault(key_selector(item), []).append(item)
        return groups

    def partition(self, predicate: Predicate[T]) -> Tuple[List[T], List[T]]:
        """partition elements into (matching, non-matching)"""
        true_items, false_items = [], []
        for item in self._query:
            (true_items if predicate(item) else false_items).append(item)
        return true_items, false_items

    def chunked(self, size: int) -> 'Query[List[T]]':
        """split into consecutive blocks of 'size'; the last one may be shorter"""
        from ..query import Query
        return Query(ChunkSequence(self._query._source, size))

    def windowed(self, size: int) -> 'Query[List[T]]':
        """create sliding windows of specified size"""
        from ..query import Query
        return Query(WindowSequence(self._query._source, size))
