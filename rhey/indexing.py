"""
index resolution shared by the read, write and delete paths of a container.

integer keys and numeric strings resolve to a single slot; strings holding a
colon are range descriptors ("start:end:step") and resolve to a list of
positions.
"""
import re
from typing import List, NamedTuple, Optional

from .errors import InvalidRangeError

_NUMERIC_KEY = re.compile(r'^\s*[+-]?\d+\s*$')


class RangeSpec(NamedTuple):
    """a parsed range descriptor, before normalisation against a length"""
    start: Optional[int]
    end: Optional[int]
    step: Optional[int]


def is_numeric_key(key) -> bool:
    return isinstance(key, str) and bool(_NUMERIC_KEY.match(key))


def is_range_key(key) -> bool:
    return isinstance(key, str) and ':' in key


def normalize_index(index: int, length: int) -> int:
    """negative indices count back from the end; -1 is the last slot"""
    return length + index if index < 0 else index


def _parse_component(text: str, descriptor: str) -> Optional[int]:
    text = text.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise InvalidRangeError(f"invalid range component {text!r} in {descriptor!r}") from None


def parse_range(descriptor: str) -> RangeSpec:
    """split "start:end:step" into its (optional) integer parts"""
    parts = descriptor.split(':')
    if len(parts) > 3:
        raise InvalidRangeError(f"range descriptor {descriptor!r} has more than three parts")
    parts += [''] * (3 - len(parts))
    start, end, step = (_parse_component(part, descriptor) for part in parts)
    return RangeSpec(start, end, step)


def range_positions(spec: RangeSpec, length: int) -> List[int]:
    """
    the source positions selected by a range over a sequence of `length` items.

    start and end default to 0 and length, are normalised for negative values
    and clamped to [0, length]. the half-open slice [start, end) is taken first,
    then every step-th element of that slice is kept. a step of 0 selects
    nothing; a negative step keeps every |step|-th element without reversing.

    a start still negative after normalisation is clamped to 0 rather than
    wrapped from the end a second time (as a js Array.slice of the normalised
    value would), so on six items "-10:" selects all six, not [2, 3, 4, 5].
    """
    start = 0 if spec.start is None else normalize_index(spec.start, length)
    end = length if spec.end is None else normalize_index(spec.end, length)
    step = 1 if spec.step is None else spec.step

    start = min(max(start, 0), length)
    end = min(max(end, 0), length)
    if step == 0 or start >= end:
        return []
    return [start + offset for offset in range(0, end - start) if offset % step == 0]
