from collections import deque
from .base import Sequence, Cursor, count_of, require_non_negative, require_positive
from .transform import _UnarySequence
from ..types import *


class SkipSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], count: int):
        super().__init__(source)
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        skipped = 0
        for item in self._source:
            if skipped < self._count:
                skipped += 1
                continue
            yield item

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else max(0, size - self._count)


class TakeSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], count: int):
        super().__init__(source)
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        if self._count == 0:
            return
        # stop before pulling past the last wanted element
        for taken, item in enumerate(self._source, 1):
            yield item
            if taken == self._count:
                return

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else min(size, self._count)


class SkipWhileSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate

    def __iter__(self) -> Cursor[T]:
        skipping = True
        for item in self._source:
            if skipping and self._predicate(item):
                continue
            skipping = False
            yield item


class TakeWhileSequence(_UnarySequence[T]):
    def __init__(self, source: Iterable[T], predicate: Predicate[T]):
        super().__init__(source)
        self._predicate = predicate

    def __iter__(self) -> Cursor[T]:
        for item in self._source:
            if not self._predicate(item):
                return
            yield item


class SkipLastSequence(_UnarySequence[T]):
    """holds back the final `count` upstream elements using a bounded buffer"""

    def __init__(self, source: Iterable[T], count: int):
        super().__init__(source)
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        buffer = deque()
        for item in self._source:
            buffer.append(item)
            if len(buffer) > self._count:
                yield buffer.popleft()

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else max(0, size - self._count)


class StepBySequence(_UnarySequence[T]):
    """yields the first element and then every `step`-th one after it"""

    def __init__(self, source: Iterable[T], step: int):
        super().__init__(source)
        self._step = require_positive(step, "step")

    def __iter__(self) -> Cursor[T]:
        for index, item in enumerate(self._source):
            if index % self._step == 0:
                yield item

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else -(-size // self._step)


# --- array twins: index straight into the backing list ---

class TakeArraySequence(Sequence[T]):
    def __init__(self, array: List[T], count: int):
        self._array = array
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        array, index = self._array, 0
        while index < self._count and index < len(array):
            yield array[index]
            index += 1

    def known_count(self) -> int:
        return min(self._count, len(self._array))


class SkipArraySequence(Sequence[T]):
    def __init__(self, array: List[T], count: int):
        self._array = array
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        array, index = self._array, self._count
        while index < len(array):
            yield array[index]
            index += 1

    def known_count(self) -> int:
        return max(0, len(self._array) - self._count)
