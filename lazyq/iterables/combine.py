from .base import Sequence, Cursor, count_of, is_restartable, require_non_negative
from .transform import _UnarySequence
from ..types import *


class _BinarySequence(Sequence[T]):
    """a stage that pulls from two upstream sources"""

    def __init__(self, source: Iterable[Any], other: Iterable[Any]):
        self._source = source
        self._other = other

    def _sources(self):
        return self._source, self._other

    def _both_counts(self) -> Tuple[Optional[int], Optional[int]]:
        return count_of(self._source), count_of(self._other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r}, {self._other!r})"


class AppendPrependSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], item: T, append: bool):
        super().__init__(source)
        self._item = item
        self._append = append

    def __iter__(self) -> Cursor[T]:
        if not self._append:
            yield self._item
        yield from self._source
        if self._append:
            yield self._item

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else size + 1


class AppendPrependArraySequence(Sequence[T]):
    def __init__(self, array: List[T], item: T, append: bool):
        self._array = array
        self._item = item
        self._append = append

    def __iter__(self) -> Cursor[T]:
        array, index = self._array, 0
        if not self._append:
            yield self._item
        while index < len(array):
            yield array[index]
            index += 1
        if self._append:
            yield self._item

    def known_count(self) -> int:
        return len(self._array) + 1


class ConcatSequence(_BinarySequence[T]):
    def __iter__(self) -> Cursor[T]:
        yield from self._source
        yield from self._other

    def known_count(self) -> Optional[int]:
        left, right = self._both_counts()
        return None if left is None or right is None else left + right


class ZipSequence(_BinarySequence[V]):
    """advances both sources in lockstep, stopping at the first exhausted one"""

    def __init__(self, source: Iterable[T], other: Iterable[U], combine: Callable[[T, U], V]):
        super().__init__(source, other)
        self._combine = combine

    def __iter__(self) -> Cursor[V]:
        for left, right in zip(self._source, self._other):
            yield self._combine(left, right)

    def known_count(self) -> Optional[int]:
        left, right = self._both_counts()
        return None if left is None or right is None else min(left, right)


class JoinSequence(_BinarySequence[Tuple[T, U]]):
    """
    nested-loop join: every left element is checked against the whole right side,
    yielding one (left, right) pair per match. the right side is materialized once
    per cursor, on the first pull.
    """

    def __init__(self, source: Iterable[T], other: Iterable[U], predicate: Callable[[T, U], bool]):
        super().__init__(source, other)
        self._predicate = predicate

    def __iter__(self) -> Cursor[Tuple[T, U]]:
        others = None
        for left in self._source:
            if others is None:
                others = list(self._other)
            for right in others:
                if self._predicate(left, right):
                    yield left, right


class DefaultIfEmptySequence(_BinarySequence[T]):
    def __iter__(self) -> Cursor[T]:
        empty = True
        for item in self._source:
            empty = False
            yield item
        if empty:
            yield from self._other

    def known_count(self) -> Optional[int]:
        left, right = self._both_counts()
        if left is None: return None
        return left if left > 0 else right


class RepeatSequence(_UnarySequence[T]):
    """replays the whole upstream `times` times, each pass from a fresh cursor"""

    def __init__(self, source: Iterable[T], times: int):
        super().__init__(source)
        self._times = require_non_negative(times, "times")
        if times > 1 and not is_restartable(source):
            raise ValueError("cannot repeat a single-use source more than once")

    def __iter__(self) -> Cursor[T]:
        for _ in range(self._times):
            yield from self._source

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else size * self._times
