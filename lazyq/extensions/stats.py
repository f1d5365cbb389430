from __future__ import annotations
import math
import typing
from numbers import Integral
import numpy as np
from ..compare import compare
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

_MISSING = object()


def _all_integral(values: List[Any]) -> bool:
    # numpy would cast these to fixed-width ints and wrap on overflow
    return all(isinstance(v, Integral) for v in values)


class StatsAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _get_values(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> List[Union[int, float]]:
        """helper to extract values for numeric reductions."""
        if selector: return [selector(item) for item in self._query]
        return list(self._query)

    def sum(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Optional[Union[int, float]]:
        """calc sum, or None for an empty sequence. integers are summed exactly, never wrapped"""
        values = self._get_values(selector)
        if not values: return None
        if _all_integral(values):
            return sum(int(v) for v in values)
        try:
            result = np.sum(values)
            return result.item() if hasattr(result, 'item') else result
        except (TypeError, ValueError):
            return sum(values[1:], values[0])

    def product(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Optional[Union[int, float]]:
        """calc product, or None for an empty sequence. integers are multiplied exactly"""
        values = self._get_values(selector)
        if not values: return None
        if _all_integral(values):
            return math.prod(int(v) for v in values)
        try:
            result = np.prod(values)
            return result.item() if hasattr(result, 'item') else result
        except (TypeError, ValueError):
            total = values[0]
            for value in values[1:]:
                total *= value
            return total

    def average(self, selector: Optional[Selector[T, Union[int, float]]] = None) -> Optional[float]:
        """running mean in a single pass, or None for an empty sequence"""
        count, mean = 0, 0.0
        for item in self._query:
            x = selector(item) if selector else item
            count += 1
            mean += (x - mean) / count
        return mean if count else None

    def min(self, comparer: Optional[Comparer[T]] = None) -> Optional[T]:
        """smallest element by natural order or by comparer; None when empty"""
        compare_items = comparer or compare
        best = _MISSING
        for item in self._query:
            if best is _MISSING or compare_items(item, best) is Ordering.LESS:
                best = item
        return None if best is _MISSING else best

    def max(self, comparer: Optional[Comparer[T]] = None) -> Optional[T]:
        """largest element by natural order or by comparer; None when empty"""
        compare_items = comparer or compare
        best = _MISSING
        for item in self._query:
            if best is _MISSING or compare_items(item, best) is Ordering.GREATER:
                best = item
        return None if best is _MISSING else best

    def minmax(self, comparer: Optional[Comparer[T]] = None) -> Optional[Tuple[T, T]]:
        """(min, max) gathered in one pass; None when empty"""
        compare_items = comparer or compare
        low = high = _MISSING
        for item in self._query:
            if low is _MISSING:
                low = high = item
                continue
            if compare_items(item, low) is Ordering.LESS:
                low = item
            if compare_items(item, high) is Ordering.GREATER:
                high = item
        return None if low is _MISSING else (low, high)
