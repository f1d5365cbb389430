"""source stages: they own no upstream and are restartable; all but an endless range are sized."""
import itertools
import math
from numbers import Integral
from .base import Sequence, Cursor, require_non_negative
from ..types import *


def _non_finite(value: Union[int, float]) -> bool:
    return isinstance(value, float) and not math.isfinite(value)


class RangeSequence(Sequence[Union[int, float]]):
    """
    arithmetic progression from start towards end by step. an infinite end gives an
    endless progression that reports no size.
    """

    def __init__(self, start: Union[int, float], end: Union[int, float],
                 step: Union[int, float] = 1, inclusive: bool = False):
        if step == 0:
            raise ValueError("step cannot be zero")
        if _non_finite(start) or _non_finite(step):
            raise ValueError(f"range start and step must be finite: {start}, {step}")
        if isinstance(end, float) and math.isnan(end):
            raise ValueError("range end cannot be nan")
        self._start = start
        self._end = end
        self._step = step
        self._inclusive = inclusive
        self._count = self._element_count()

    def _element_count(self) -> Optional[int]:
        span = self._end - self._start
        if all(isinstance(x, Integral) for x in (self._start, self._end, self._step)):
            count = span // self._step + 1 if self._inclusive else -(-span // self._step)
            return max(0, count)
        quotient = span / self._step
        if math.isinf(quotient):
            return None if quotient > 0 else 0
        # an end the step lands on up to float error counts as reached
        nearest = round(quotient)
        if math.isclose(quotient, nearest, rel_tol=1e-9):
            quotient = nearest
        count = math.floor(quotient) + 1 if self._inclusive else math.ceil(quotient)
        return max(0, count)

    def __iter__(self) -> Cursor[Union[int, float]]:
        indexes = itertools.count() if self._count is None else range(self._count)
        # derive each value from the index so float steps do not drift
        for index in indexes:
            yield self._start + index * self._step

    def known_count(self) -> Optional[int]:
        return self._count

    def __repr__(self) -> str:
        bound = "]" if self._inclusive else ")"
        return f"RangeSequence[{self._start}, {self._end}{bound} step {self._step}"


class RepeatValueSequence(Sequence[T]):
    def __init__(self, value: T, count: int):
        self._value = value
        self._count = require_non_negative(count)

    def __iter__(self) -> Cursor[T]:
        for _ in range(self._count):
            yield self._value

    def known_count(self) -> int:
        return self._count


class GeneratorSequence(Sequence[T]):
    """`length` values from the recurrence value = generator(index, previous), seeded by `seed`"""

    def __init__(self, length: int, generator: Callable[[int, Optional[T]], T], seed: Optional[T] = None):
        self._length = require_non_negative(length, "length")
        self._generator = generator
        self._seed = seed

    def __iter__(self) -> Cursor[T]:
        previous = self._seed
        for index in range(self._length):
            previous = self._generator(index, previous)
            yield previous

    def known_count(self) -> int:
        return self._length
