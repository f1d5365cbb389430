from functools import cmp_to_key
from .types import *


def compare(x: Any, y: Any) -> Ordering:
    """natural ordering of two elements. raises TypeError if they are not comparable."""
    if x < y: return Ordering.LESS
    if y < x: return Ordering.GREATER
    return Ordering.EQUAL


def compare_reverse(x: Any, y: Any) -> Ordering:
    """inverse of the natural ordering"""
    return compare(y, x)


def to_sort_key(comparer: Comparer[T]) -> Callable[[T], Any]:
    """adapt an ordering comparer into a key usable by sorted()"""
    return cmp_to_key(lambda x, y: comparer(x, y).value)
