from enum import Enum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]


class Ordering(Enum):
    """three-valued result of comparing two elements"""
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, value: int) -> 'Ordering':
        """map a signed integer onto an ordering"""
        if value < 0: return cls.LESS
        if value > 0: return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> 'Ordering':
        return Ordering(-self.value)


Comparer = Callable[[T, T], Ordering]


class IndexedValue(NamedTuple):
    """an element decorated with its position in the sequence"""
    index: int
    value: Any


class KeyValue(NamedTuple):
    """an element decorated with a derived key"""
    key: Any
    value: Any
