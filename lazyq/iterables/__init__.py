from .base import (
    Sequence, Cursor, IterableSequence, SingleUseSequence,
    as_sequence, count_of, is_restartable
)
from .transform import MapSequence, FlatMapSequence, FilterSequence, IndexedSequence, KeyedSequence
from .slicing import (
    SkipSequence, TakeSequence, SkipWhileSequence, TakeWhileSequence, SkipLastSequence,
    StepBySequence, TakeArraySequence, SkipArraySequence
)
from .combine import (
    AppendPrependSequence, AppendPrependArraySequence, ConcatSequence, ZipSequence,
    JoinSequence, DefaultIfEmptySequence, RepeatSequence
)
from .buffer import ChunkSequence, WindowSequence
from .generators import RangeSequence, RepeatValueSequence, GeneratorSequence
