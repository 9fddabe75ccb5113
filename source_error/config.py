"""
Process-wide switches controlling what ``source_error`` captures.

The current settings are a single frozen ``Config``. Changing a setting swaps the whole
object, so a call to ``source_error`` always sees one consistent snapshot even if another
thread is flipping switches. Already constructed errors are never affected.

The intent is still to configure once at start-up, e.g.::

    import source_error
    source_error.configure(no_debug=True)  # production: pass failures through
"""

from contextlib import contextmanager
import attr
import threading


@attr.s(frozen=True, slots=True)
class Config:
    """
    ``no_debug``: ``source_error`` becomes a no-op and returns the cause as is.

    ``no_stack``: record the location but skip the (comparatively costly) stack capture.
    """

    no_debug = attr.ib(default=False, converter=bool)
    no_stack = attr.ib(default=False, converter=bool)


_lock = threading.Lock()
_current = Config()


def get_config():
    return _current


def set_config(config):
    "Replace the current config, returning the previous one."
    global _current
    if not isinstance(config, Config):
        raise TypeError("Expected a Config, got {!r}".format(config))
    with _lock:
        previous, _current = _current, config
    return previous


def configure(**changes):
    """
    Change individual switches, returning the previous config.

    Unknown names raise ``TypeError``.
    """
    global _current
    with _lock:
        previous = _current
        _current = attr.evolve(previous, **changes)
    return previous


@contextmanager
def configured(**changes):
    """
    Apply changes for the duration of a ``with`` block.

    On exit only the switches named in ``changes`` are put back; anything else changed
    meanwhile is left alone.

    >>> with configured(no_stack=True):
    ...   get_config().no_stack
    True
    """
    previous = configure(**changes)
    try:
        yield get_config()
    finally:
        configure(**{name: getattr(previous, name) for name in changes})
