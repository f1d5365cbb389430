from dataclasses import dataclass, replace
from .types import *


@dataclass(frozen=True)
class ToStringOptions:
    """formatting knobs for rendering a sequence as text"""
    separator: str = ", "
    prefix: str = "["
    postfix: str = "]"
    limit: Optional[int] = None
    truncate: str = "..."

    def __post_init__(self):
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit cannot be negative: {self.limit}")


DEFAULT_OPTIONS = ToStringOptions()


def resolve_options(options: Union[str, ToStringOptions, None] = None, **overrides: Any) -> ToStringOptions:
    """
    accept an options object, a bare separator string, or nothing,
    then apply keyword overrides on top.
    """
    if options is None:
        resolved = DEFAULT_OPTIONS
    elif isinstance(options, str):
        resolved = ToStringOptions(separator=options)
    else:
        resolved = options
    return replace(resolved, **overrides) if overrides else resolved


def _is_nested(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, dict))


def render(iterable: Iterable[Any], options: ToStringOptions = DEFAULT_OPTIONS) -> str:
    """
    render elements between prefix and postfix. nested iterables are rendered
    recursively with the same options. once `limit` elements have been written,
    the truncate marker is emitted if anything remains.
    """
    parts = [options.prefix]
    for index, item in enumerate(iterable):
        if index > 0:
            parts.append(options.separator)
        if options.limit is not None and index >= options.limit:
            parts.append(options.truncate)
            break
        parts.append(render(item, options) if _is_nested(item) else repr(item))
    parts.append(options.postfix)
    return "".join(parts)
