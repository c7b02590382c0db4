"""
rhey: a list with negative / string indexing, "start:end:step" range views and
one-line record queries (grouping, partitioning, set algebra, sampling).

    from rhey import R
    people = R([{'name': 'ann', 'team': 'a'}, {'name': 'bo', 'team': 'b'}])
    people[-1]['name']                 # 'bo'
    people['0:2'].where(...).map(...)  # fluent slice view
    people.group_by('team')            # {'a': Container([...]), 'b': Container([...])}
"""

# expose the main classes
from .container import Container
from .view import SliceView

# expose the factory functions
from .factories import (
    from_iterable,
    of,
    from_range,
    repeat,
    empty,
    rhey,
    R,
)

# expose errors and settings
from .errors import RHeyError, InvalidArgumentError, NotFoundError, InvalidRangeError
from .config import Settings, configure, get_settings, reset

# define what `import *` does
__all__ = [
    "Container",
    "SliceView",
    "from_iterable",
    "of",
    "from_range",
    "repeat",
    "empty",
    "rhey",
    "R",
    "RHeyError",
    "InvalidArgumentError",
    "NotFoundError",
    "InvalidRangeError",
    "Settings",
    "configure",
    "get_settings",
    "reset",
]
