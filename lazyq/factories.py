import typing
from .types import *
from .iterables import RangeSequence, RepeatValueSequence, GeneratorSequence

if typing.TYPE_CHECKING:
    from .query import Query, ArrayQuery

def from_iterable(data: Iterable[T]) -> 'Query[T]':
    """
    create a query from any iterable. lists and tuples become array-backed queries;
    live iterators (generators, file objects...) become single-use queries;
    other collections are wrapped as restartable sequences.
    """
    from .query import Query, ArrayQuery, IQueryable
    if isinstance(data, IQueryable):
        return data
    if isinstance(data, (list, tuple)):
        return ArrayQuery(data)
    return Query(data)

def of(*values: T) -> 'ArrayQuery[T]':
    """create query from literal values"""
    from .query import ArrayQuery
    return ArrayQuery(list(values))

def from_mapping(mapping: Mapping[K, V]) -> 'Query[KeyValue]':
    """create query over the (key, value) entries of a mapping"""
    from .query import Query
    return Query(mapping.items()).map(lambda entry: KeyValue(*entry))

def empty() -> 'ArrayQuery[Any]':
    """create empty query"""
    from .query import ArrayQuery
    return ArrayQuery([])

def from_range(start: Union[int, float], end: Union[int, float],
               step: Union[int, float] = 1) -> 'Query[Union[int, float]]':
    """numbers from start up to, but excluding, end"""
    from .query import Query
    return Query(RangeSequence(start, end, step))

def from_range_inclusive(start: Union[int, float], end: Union[int, float],
                         step: Union[int, float] = 1) -> 'Query[Union[int, float]]':
    """numbers from start up to end, including end when the step lands on it"""
    from .query import Query
    return Query(RangeSequence(start, end, step, inclusive=True))

def repeat(item: T, count: int) -> 'Query[T]':
    """create query with repeated item"""
    from .query import Query
    return Query(RepeatValueSequence(item, count))

def generate(length: int, generator_func: Callable[[int, Optional[T]], T],
             seed: Optional[T] = None) -> 'Query[T]':
    """generate 'length' values where each is generator_func(index, previous)"""
    from .query import Query
    return Query(GeneratorSequence(length, generator_func, seed))

# --- aliases ---
Q = from_iterable
q = from_iterable
