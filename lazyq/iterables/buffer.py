from collections import deque
from .base import Cursor, count_of, require_positive
from .transform import _UnarySequence
from ..types import *


class ChunkSequence(_UnarySequence[List[T]]):
    """disjoint blocks of `size` elements; the last block may be shorter"""

    def __init__(self, source: Iterable[T], size: int):
        super().__init__(source)
        self._size = require_positive(size, "chunk size")

    def __iter__(self) -> Cursor[List[T]]:
        chunk = []
        for item in self._source:
            chunk.append(item)
            if len(chunk) == self._size:
                yield chunk
                chunk = []
        if chunk:
            yield chunk

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else -(-size // self._size)


class WindowSequence(_UnarySequence[List[T]]):
    """overlapping windows of `size` elements, one per upstream element once full"""

    def __init__(self, source: Iterable[T], size: int):
        super().__init__(source)
        self._size = require_positive(size, "window size")

    def __iter__(self) -> Cursor[List[T]]:
        window = deque(maxlen=self._size)
        for item in self._source:
            window.append(item)
            if len(window) == self._size:
                yield list(window)

    def known_count(self) -> Optional[int]:
        size = count_of(self._source)
        return None if size is None else max(0, size - self._size + 1)
