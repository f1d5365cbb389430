from __future__ import annotations
import logging
import sys
import typing
import numpy as np
import pandas as pd
from ..compare import compare
from ..iterables import count_of
from ..rendering import ToStringOptions, render, resolve_options
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, ArrayQuery

logger = logging.getLogger(__name__)

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """operations that force evaluation and return plain values"""

    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._query)

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._query)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary. later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._query}

    # --- counting and quantifiers ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """
        count elements. without a predicate, a sized source answers directly;
        otherwise the sequence is walked once.
        """
        if predicate is None:
            known = count_of(self._query)
            if known is not None:
                logger.debug("count answered from sized source: %d", known)
                return known
            logger.debug("count falling back to traversal of %r", self._query)
        count = 0
        for item in self._query:
            if predicate is None or predicate(item):
                count += 1
                if count > sys.maxsize:
                    raise OverflowError("size of the sequence exceeds the maximum integer size")
        return count

    def is_empty(self) -> bool:
        for _ in self._query:
            return False
        return True

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return not self.is_empty()
        return any(predicate(x) for x in self._query)

    def every(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(x) for x in self._query)

    def contains(self, value: T) -> bool:
        return any(item == value for item in self._query)

    def contains_all(self, values: Iterable[T]) -> bool:
        return all(self.contains(value) for value in values)

    # --- positional access ---

    def first(self) -> Optional[T]:
        """get first element, or None when empty"""
        return self.first_or_else(None)

    def first_or_else(self, default: T) -> T:
        result = next(iter(self._query), _MISSING)
        return default if result is _MISSING else result

    def last(self) -> Optional[T]:
        """get last element, or None when empty"""
        return self.last_or_else(None)

    def last_or_else(self, default: T) -> T:
        last = default
        for item in self._query:
            last = item
        return last

    def element_at(self, index: int) -> Optional[T]:
        return self.element_at_or_else(index, None)

    def element_at_or_else(self, index: int, default: T) -> T:
        if index < 0:
            return default
        for i, item in enumerate(self._query):
            if i == index:
                return item
        return default

    # --- searching ---

    def find(self, predicate: Predicate[T]) -> Optional[T]:
        return self.find_or_else(None, predicate)

    def find_or_else(self, default: T, predicate: Predicate[T]) -> T:
        for item in self._query:
            if predicate(item):
                return item
        return default

    def find_last(self, predicate: Predicate[T]) -> Optional[T]:
        return self.find_last_or_else(None, predicate)

    def find_last_or_else(self, default: T, predicate: Predicate[T]) -> T:
        last = default
        for item in self._query:
            if predicate(item):
                last = item
        return last

    def find_index(self, predicate: Predicate[T]) -> Optional[int]:
        for index, item in enumerate(self._query):
            if predicate(item):
                return index
        return None

    def find_last_index(self, predicate: Predicate[T]) -> Optional[int]:
        last = None
        for index, item in enumerate(self._query):
            if predicate(item):
                last = index
        return last

    def find_indices(self, predicate: Predicate[T]) -> List[int]:
        return [index for index, item in enumerate(self._query) if predicate(item)]

    def index_of(self, value: T) -> Optional[int]:
        return self.find_index(lambda item: item == value)

    def last_index_of(self, value: T) -> Optional[int]:
        return self.find_last_index(lambda item: item == value)

    def single(self, predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """the only (matching) element; None when there are zero or several"""
        return self.single_or_else(None, predicate)

    def single_or_else(self, default: T, predicate: Optional[Predicate[T]] = None) -> T:
        result = _MISSING
        for item in self._query:
            if predicate is None or predicate(item):
                if result is not _MISSING:
                    return default
                result = item
        return default if result is _MISSING else result

    # --- aggregation ---

    def reduce(self, reducer: Callable[[T, T], T]) -> Optional[T]:
        """fold using the first element as the seed; None when empty"""
        iterator = iter(self._query)
        result = next(iterator, _MISSING)
        if result is _MISSING:
            return None
        for item in iterator:
            result = reducer(result, item)
        return result

    def fold(self, seed: U, combine: Accumulator[U, T]) -> U:
        """accumulate from an explicit seed; the seed itself for an empty sequence"""
        result = seed
        for item in self._query:
            result = combine(result, item)
        return result

    def sequence_equals(self, other: Iterable[T]) -> bool:
        """same length and pairwise-equal elements, compared in lockstep"""
        left, right = iter(self._query), iter(other)
        while True:
            x, y = next(left, _MISSING), next(right, _MISSING)
            if x is _MISSING or y is _MISSING:
                return x is y
            if x != y:
                return False

    # --- sortedness checks ---

    def is_sorted(self, comparer: Optional[Comparer[T]] = None) -> bool:
        return self._is_ordered(lambda item: item, comparer, Ordering.GREATER)

    def is_sorted_descending(self, comparer: Optional[Comparer[T]] = None) -> bool:
        return self._is_ordered(lambda item: item, comparer, Ordering.LESS)

    def is_sorted_by(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]] = None) -> bool:
        return self._is_ordered(key_selector, comparer, Ordering.GREATER)

    def is_sorted_by_descending(self, key_selector: KeySelector[T, K],
                                comparer: Optional[Comparer[K]] = None) -> bool:
        return self._is_ordered(key_selector, comparer, Ordering.LESS)

    def _is_ordered(self, key_selector: KeySelector[T, K], comparer: Optional[Comparer[K]],
                    violation: Ordering) -> bool:
        """false as soon as a neighbouring pair compares as 'violation'"""
        compare_keys = comparer or compare
        previous = _MISSING
        for item in self._query:
            current = key_selector(item)
            if previous is not _MISSING and compare_keys(previous, current) is violation:
                return False
            previous = current
        return True

    # --- rendering ---

    def string(self, options: Union[str, ToStringOptions, None] = None, **overrides: Any) -> str:
        """
        render the sequence as text, e.g. "[1, 2, 3]".
        options may be a ToStringOptions, a bare separator, or keyword overrides
        (separator, prefix, postfix, limit, truncate).
        """
        return render(self._query, resolve_options(options, **overrides))


class ArrayTerminalAccessor(TerminalAccessor[T]):
    """terminal operations with direct-index shortcuts for array-backed queries"""

    @property
    def _array(self) -> Union[List[T], Tuple[T, ...]]:
        return self._query._get_source()

    def list(self) -> List[T]:
        return list(self._array)

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        if predicate is None: return len(self._array)
        return super().count(predicate)

    def is_empty(self) -> bool:
        return len(self._array) == 0

    def first_or_else(self, default: T) -> T:
        return self._array[0] if self._array else default

    def last_or_else(self, default: T) -> T:
        return self._array[-1] if self._array else default

    def element_at_or_else(self, index: int, default: T) -> T:
        return self._array[index] if 0 <= index < len(self._array) else default
