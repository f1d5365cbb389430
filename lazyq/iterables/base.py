"""
the cursor protocol and the two capability variants every stage builds on.

a sequence is a recipe: calling iter() on it creates a brand new cursor (a python
iterator) that walks the recipe from its true origin. nothing is pulled at
construction time; all work happens while a cursor advances.
"""
import logging
from abc import ABC, abstractmethod
from collections import abc as cabc
from ..types import *

logger = logging.getLogger(__name__)

Cursor = Iterator


class Sequence(ABC, Generic[T]):
    """abstract lazy sequence. subclasses store upstream sources and parameters only."""

    @abstractmethod
    def __iter__(self) -> Cursor[T]:
        """create a fresh cursor"""
        pass

    def _sources(self) -> Tuple[Iterable[Any], ...]:
        """the upstream sources this stage pulls from"""
        return ()

    def known_count(self) -> Optional[int]:
        """element count if it can be reported without traversal, else None"""
        return None

    @property
    def restartable(self) -> bool:
        return all(is_restartable(source) for source in self._sources())

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class IterableSequence(Sequence[T]):
    """restartable view over a re-iterable host collection (set, str, range, dict...)"""

    def __init__(self, iterable: Iterable[T]):
        self._iterable = iterable

    def __iter__(self) -> Cursor[T]:
        return iter(self._iterable)

    def _sources(self):
        return (self._iterable,)

    def known_count(self) -> Optional[int]:
        return count_of(self._iterable)

    def __repr__(self) -> str:
        return f"IterableSequence({type(self._iterable).__name__})"


class SingleUseSequence(Sequence[T]):
    """
    wraps a live iterator (e.g. a generator object). every traversal shares the one
    underlying cursor, so only the first traversal sees the elements.
    """

    def __init__(self, iterator: Iterator[T]):
        self._iterator = iterator
        self._traversed = False

    def __iter__(self) -> Cursor[T]:
        if self._traversed:
            logger.warning("single-use source %r traversed again; it will not restart", self._iterator)
        self._traversed = True
        return self._iterator

    @property
    def restartable(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"SingleUseSequence({type(self._iterator).__name__})"


def is_restartable(source: Iterable[Any]) -> bool:
    """a source is restartable unless it is itself a live iterator"""
    if isinstance(source, Sequence):
        return source.restartable
    return not isinstance(source, cabc.Iterator)


def count_of(source: Iterable[Any]) -> Optional[int]:
    """probe the sized capability of a source without traversing it"""
    if isinstance(source, (list, tuple)):
        return len(source)
    if isinstance(source, Sequence):
        return source.known_count()
    if isinstance(source, cabc.Sized) and not isinstance(source, cabc.Iterator):
        return len(source)
    return None


def as_sequence(source: Iterable[T]) -> Sequence[T]:
    """wrap a host iterable into the matching capability variant"""
    if isinstance(source, Sequence):
        return source
    if isinstance(source, cabc.Iterator):
        return SingleUseSequence(source)
    return IterableSequence(source)


def require_non_negative(value: int, name: str = "count") -> int:
    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
    return value


def require_positive(value: int, name: str = "size") -> int:
    if value <= 0:
        raise ValueError(f"{name} must be positive: {value}")
    return value
