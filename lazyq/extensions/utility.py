from __future__ import annotations
import typing
from ..iterables import MapSequence
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class UtilityAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def for_each(self, action: Callable[[T], Any]) -> None:
        """drive one full traversal now, calling action on every element"""
        for item in self._query:
            action(item)

    def seek(self, action: Callable[[T], Any]) -> 'Query[T]':
        """for_each, then hand back the same query so the chain can continue."""
        self.for_each(action)
        return self._query

    def side_effect(self, action: Callable[[T], Any]) -> 'Query[T]':
        """
        tap stage: a map that calls action and passes the element through unchanged.
        nothing runs until a cursor pulls, and the action fires again on every traversal,
        only for the elements actually pulled.
        example: .filter(...).util.side_effect(print).take(3)
        """
        from ..query import Query

        def tap(item: T) -> T:
            action(item)
            return item

        return Query(MapSequence(self._query._source, tap))

    def pipe(self, func: Callable[..., U], *args, **kwargs) -> U:
        """call func(query, *args, **kwargs) and return its result"""
        return func(self._query, *args, **kwargs)
