from __future__ import annotations
import typing
from collections import deque
from ..compare import to_sort_key
from ..iterables import (
    MapSequence, FlatMapSequence, FilterSequence, IndexedSequence, KeyedSequence,
    SkipSequence, TakeSequence, SkipWhileSequence, TakeWhileSequence, SkipLastSequence,
    StepBySequence, AppendPrependSequence, ConcatSequence, DefaultIfEmptySequence, RepeatSequence
)
from ..iterables.base import require_non_negative
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, ArrayQuery


class _CoreOperations(Generic[T]):
    """chain operations. lazy ones wrap a new stage; sorts and tail reads materialize."""

    def map(self: 'Query[T]', transform: Selector[T, U]) -> 'Query[U]':
        """project each element to a new form"""
        from ..query import Query
        return Query(MapSequence(self._source, transform))

    def flat_map(self: 'Query[T]', transform: Selector[T, Iterable[U]]) -> 'Query[U]':
        """project each element to an iterable and flatten one level"""
        from ..query import Query
        return Query(FlatMapSequence(self._source, transform))

    def filter(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """keep elements matching the predicate"""
        from ..query import Query
        return Query(FilterSequence(self._source, predicate))

    def filter_not(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """drop elements matching the predicate"""
        return self.filter(lambda item: not predicate(item))

    def of_type(self: 'Query[T]', type_filter: Type[U]) -> 'Query[U]':
        """keep elements that are instances of the given type"""
        return self.filter(lambda item: isinstance(item, type_filter))

    def skip(self: 'Query[T]', count: int) -> 'Query[T]':
        """skip the first 'count' elements"""
        from ..query import Query
        return Query(SkipSequence(self._source, count))

    def take(self: 'Query[T]', count: int) -> 'Query[T]':
        """take the first 'count' elements"""
        from ..query import Query
        return Query(TakeSequence(self._source, count))

    def skip_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """skip elements while predicate is true"""
        from ..query import Query
        return Query(SkipWhileSequence(self._source, predicate))

    def take_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """take elements while predicate is true"""
        from ..query import Query
        return Query(TakeWhileSequence(self._source, predicate))

    def skip_last(self: 'Query[T]', count: int) -> 'Query[T]':
        """drop the final 'count' elements"""
        from ..query import Query
        return Query(SkipLastSequence(self._source, count))

    def take_last(self: 'Query[T]', count: int) -> 'ArrayQuery[T]':
        """
        keep only the final 'count' elements. this is EAGER: the source is walked
        once with a bounded buffer.
        """
        from ..query import ArrayQuery
        require_non_negative(count)
        if count == 0:
            return ArrayQuery([])
        return ArrayQuery(list(deque(self._source, maxlen=count)))

    def append(self: 'Query[T]', element: T) -> 'Query[T]':
        """appends a value to the end of the sequence"""
        from ..query import Query
        return Query(AppendPrependSequence(self._source, element, append=True))

    def prepend(self: 'Query[T]', element: T) -> 'Query[T]':
        """adds a value to the beginning of the sequence"""
        from ..query import Query
        return Query(AppendPrependSequence(self._source, element, append=False))

    def concat(self: 'Query[T]', other: Iterable[T]) -> 'Query[T]':
        """all elements of this sequence followed by all elements of another"""
        from ..query import Query
        return Query(ConcatSequence(self._source, other))

    def indexed(self: 'Query[T]') -> 'Query[IndexedValue]':
        """pair each element with its position"""
        from ..query import Query
        return Query(IndexedSequence(self._source))

    def keyed(self: 'Query[T]', key_selector: KeySelector[T, K]) -> 'Query[KeyValue]':
        """pair each element with a derived key"""
        from ..query import Query
        return Query(KeyedSequence(self._source, key_selector))

    def step_by(self: 'Query[T]', step: int) -> 'Query[T]':
        """every 'step'-th element, starting with the first"""
        from ..query import Query
        return Query(StepBySequence(self._source, step))

    def repeat(self: 'Query[T]', times: int) -> 'Query[T]':
        """replay the whole sequence 'times' times"""
        from ..query import Query
        return Query(RepeatSequence(self._source, times))

    def default_if_empty(self: 'Query[T]', defaults: Iterable[T]) -> 'Query[T]':
        """the elements of this sequence, or 'defaults' if it turns out to be empty"""
        from ..query import Query
        return Query(DefaultIfEmptySequence(self._source, defaults))

    def reversed(self: 'Query[T]') -> 'ArrayQuery[T]':
        """inverts the order of the elements (eager)"""
        from ..query import ArrayQuery
        data = list(self._source)
        data.reverse()
        return ArrayQuery(data)

    # --- sort family: eager and stable ---

    def sort(self: 'Query[T]', comparer: Optional[Comparer[T]] = None) -> 'ArrayQuery[T]':
        """sort by natural order, or by an ordering comparer"""
        from ..query import ArrayQuery
        key = to_sort_key(comparer) if comparer else None
        return ArrayQuery(sorted(self._source, key=key))

    def sort_descending(self: 'Query[T]', comparer: Optional[Comparer[T]] = None) -> 'ArrayQuery[T]':
        from ..query import ArrayQuery
        if comparer is None:
            return ArrayQuery(sorted(self._source, reverse=True))
        return ArrayQuery(sorted(self._source, key=to_sort_key(lambda x, y: comparer(y, x))))

    def sort_by(self: 'Query[T]', key_selector: KeySelector[T, K],
                comparer: Optional[Comparer[K]] = None) -> 'ArrayQuery[T]':
        """sort elements by a derived key"""
        from ..query import ArrayQuery
        if comparer is None:
            return ArrayQuery(sorted(self._source, key=key_selector))
        key_order = to_sort_key(comparer)
        return ArrayQuery(sorted(self._source, key=lambda item: key_order(key_selector(item))))

    def sort_by_descending(self: 'Query[T]', key_selector: KeySelector[T, K],
                           comparer: Optional[Comparer[K]] = None) -> 'ArrayQuery[T]':
        from ..query import ArrayQuery
        if comparer is None:
            # reverse=True keeps equal keys in their original order
            return ArrayQuery(sorted(self._source, key=key_selector, reverse=True))
        key_order = to_sort_key(lambda x, y: comparer(y, x))
        return ArrayQuery(sorted(self._source, key=lambda item: key_order(key_selector(item))))
