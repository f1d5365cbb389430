from .base import Sequence, Cursor, count_of
from ..types import *


class _UnarySequence(Sequence[T]):
    """a stage with exactly one upstream source"""

    def __init__(self, source: Iterable[Any]):
        self._source = source

    def _sources(self):
        return (self._source,)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"


class MapSequence(_UnarySequence[U]):
    def __init__(self, source: Iterable[T], transform: Selector[T, U]):
        super().__init__(source)
        self._transform = transform

    def __iter__(self) -> Cursor[U]:
        transform = self._transform
        for item in self._source:
            yield transform(item)

    def known_count(self) -> Optional[int]:
        return count_of(self._source)


class FlatMapSequence(_UnarySequence[U]):
    def __init__(self, source: Iterable[T], transform: Selector[T, Iterable[U]]):
        super().__init__(source)
        self._transform = transform

    def __iter__(self) -> Cursor[U]:
        for item in self._source:
            yield from self._transform(item)


class FilterSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate

    def __iter__(self) -> Cursor[T]:
        predicate = self._predicate
        for item in self._source:
            if predicate(item):
                yield item


class IndexedSequence(_UnarySequence[IndexedValue]):
    def __iter__(self) -> Cursor[IndexedValue]:
        for index, item in enumerate(self._source):
            yield IndexedValue(index, item)

    def known_count(self) -> Optional[int]:
        return count_of(self._source)


class KeyedSequence(_UnarySequence[KeyValue]):
    def __init__(self, source: Iterable[T], key_selector: KeySelector[T, K]):
        super().__init__(source)
        self._key_selector = key_selector

    def __iter__(self) -> Cursor[KeyValue]:
        for item in self._source:
            yield KeyValue(self._key_selector(item), item)

    def known_count(self) -> Optional[int]:
        return count_of(self._source)
