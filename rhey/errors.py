class RHeyError(Exception):
    """base class for errors raised by rhey containers."""
    pass


class InvalidArgumentError(RHeyError, TypeError):
    """a start position was neither an integer index nor a predicate."""
    pass


class NotFoundError(RHeyError, LookupError):
    """a predicate start position matched no element."""
    pass


class InvalidRangeError(RHeyError, ValueError):
    """a range descriptor ("start:end:step") could not be parsed."""
    pass
