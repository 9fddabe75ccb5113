"""
Walking chains of wrapped failures.

A link is followed through the value's ``unwrap()`` method if it has one (as
``SourceError`` does), otherwise through ``__cause__`` as set by ``raise ... from ...``.
Chains are walked as they are; nothing is flattened or deduplicated.
"""

from .helpers import trace


def unwrap(err):
    "Return the value ``err`` wraps, or None if it wraps nothing."
    try:
        method = err.unwrap
    except AttributeError:
        return getattr(err, "__cause__", None)
    return method()


def causes(err):
    """
    Yield each successive wrapped value below ``err``, innermost last.

    Stops at the first ``None``, or if the chain loops back on itself.
    """
    seen = {id(err)}
    current = unwrap(err)
    while current is not None:
        if id(current) in seen:
            trace("causes({!r}): cycle at {!r}", err, current)
            return
        seen.add(id(current))
        yield current
        current = unwrap(current)


def root_cause(err):
    "The innermost value of the chain, or ``err`` itself if it wraps nothing."
    result = err
    for result in causes(err):
        pass
    return result


def find_cause(err, typ):
    "Return the first value in the chain, starting with ``err``, that is an instance of ``typ``."
    if isinstance(err, typ):
        return err
    for cause in causes(err):
        if isinstance(cause, typ):
            return cause
    return None
