from __future__ import annotations

from abc import abstractmethod
from .types import *
from .iterables import (
    Sequence, as_sequence, count_of,
    TakeArraySequence, SkipArraySequence, AppendPrependArraySequence
)
from .iterables.base import require_non_negative

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.stats import StatsAccessor
from .extensions.utility import UtilityAccessor
from .extensions.terminal import TerminalAccessor, ArrayTerminalAccessor

# --- abstract base class ---

class IQueryable(Sequence[T]):
    @abstractmethod
    def _get_source(self) -> Iterable[T]:
        """get the sequence or array this handle wraps"""
        pass

# --- base handle implementation ---

class _BaseQuery(IQueryable[T], _CoreOperations[T]):
    _terminal_accessor = TerminalAccessor

    def __init__(self):
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.group = GroupingAccessor(self)
        self.stats = StatsAccessor(self)
        self.util = UtilityAccessor(self)
        self.to = self._terminal_accessor(self)

    @property
    def _source(self) -> Iterable[T]:
        return self._get_source()

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_source())

    def _sources(self):
        return (self._get_source(),)

    def known_count(self) -> Optional[int]:
        return count_of(self._get_source())

    def __str__(self) -> str:
        return self.to.string()


# --- generic handle ---

class Query(_BaseQuery[T]):
    """a lazy, chainable handle over any sequence recipe."""

    def __init__(self, source: Iterable[T]):
        super().__init__()
        self._sequence = as_sequence(source)

    def _get_source(self) -> Sequence[T]:
        return self._sequence

    def __repr__(self) -> str:
        return f"Query({self._sequence!r})"


# --- array-backed handle ---

class ArrayQuery(_BaseQuery[T]):
    """
    a handle over a concrete list (held by reference, never copied). knows its length
    and swaps in index-driven stages where that avoids driving a cursor chain.
    """
    _terminal_accessor = ArrayTerminalAccessor

    def __init__(self, array: Union[List[T], Tuple[T, ...]]):
        # accessors read the array, so it must be in place before they are built
        self._array = array
        super().__init__()

    def _get_source(self) -> Union[List[T], Tuple[T, ...]]:
        return self._array

    def __len__(self) -> int:
        return len(self._array)

    def __repr__(self) -> str:
        return f"ArrayQuery(len={len(self._array)})"

    def take(self, count: int) -> 'Query[T]':
        return Query(TakeArraySequence(self._array, count))

    def skip(self, count: int) -> 'Query[T]':
        return Query(SkipArraySequence(self._array, count))

    def append(self, element: T) -> 'Query[T]':
        return Query(AppendPrependArraySequence(self._array, element, append=True))

    def prepend(self, element: T) -> 'Query[T]':
        return Query(AppendPrependArraySequence(self._array, element, append=False))

    def take_last(self, count: int) -> 'ArrayQuery[T]':
        require_non_negative(count)
        return ArrayQuery(list(self._array[max(0, len(self._array) - count):]) if count else [])

    def reversed(self) -> 'ArrayQuery[T]':
        return ArrayQuery(self._array[::-1])
