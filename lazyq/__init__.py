r"""
'   .__
'   |  | _____  ___________.__. ______
'   |  | \__  \ \___   <   |  |/ ____/
'   |  |__/ __ \_/    / \___  < <_|  |
'   |____(____  /_____ \/ ____|\__   |
'             \/      \/\/        |__|
"""
import logging

# expose the main classes
from .query import IQueryable, Query, ArrayQuery

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_mapping,
    empty,
    from_range,
    from_range_inclusive,
    repeat,
    generate,
    Q,
    q
)

# expose supporting types
from .types import Ordering, IndexedValue, KeyValue
from .compare import compare, compare_reverse
from .rendering import ToStringOptions
from .iterables import Sequence, IterableSequence, SingleUseSequence

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "IQueryable",
    "Query",
    "ArrayQuery",
    "from_iterable",
    "of",
    "from_mapping",
    "empty",
    "from_range",
    "from_range_inclusive",
    "repeat",
    "generate",
    "Q",
    "q",
    "Ordering",
    "IndexedValue",
    "KeyValue",
    "compare",
    "compare_reverse",
    "ToStringOptions",
    "Sequence",
    "IterableSequence",
    "SingleUseSequence"
]
