# stateless helpers that take a container and return a new container or mapping
from .grouping import group_by, partition, chunk
from .set import union, intersection, difference, difference_by, unique, distinct_by
from .comprehend import comprehend

__all__ = [
    "group_by",
    "partition",
    "chunk",
    "union",
    "intersection",
    "difference",
    "difference_by",
    "unique",
    "distinct_by",
    "comprehend",
]
