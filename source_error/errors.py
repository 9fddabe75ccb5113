from .chain import causes
from .config import get_config
from .frames import CallSite, FrameInspector
from .helpers import (
    CAUSE_PREFIX,
    SITE_PATTERN,
    STACK_PATTERN,
    STR_CODE_LOCATION,
    trace,
)

import logging
import traceback

logger = logging.getLogger(__name__)
_inspector = FrameInspector()


class SourceError(Exception):
    """
    Wraps a failure together with the place it was observed.

    Instances are normally made by ``source_error()`` rather than directly. The wrapped
    value is kept as is and returned by ``unwrap()``; if it's an exception it is also the
    ``__cause__``, so the interpreter prints both tracebacks.

    There are two renderings, both built from ``location()``:

    ``str(err)`` / ``err.message()``
        One line: ``error in source File: '...', Line: 12, Function: '...'. Stack: ...; <cause>``

    ``err.detail()``
        The same location over several lines, followed by the stack and one
        ``Caused by:`` line per link of the chain.
    """

    def __init__(self, cause=None, site=None, stack=""):
        if site is None:
            site = CallSite.EMPTY
        # Keep args in constructor order so copies and pickles rebuild the same value.
        super().__init__(cause, site, stack)
        self._cause = cause
        self._site = site
        self._stack = stack
        if isinstance(cause, BaseException):
            self.__cause__ = cause

    @property
    def cause(self):
        return self._cause

    @property
    def site(self):
        return self._site

    @property
    def file(self):
        return self._site.file

    @property
    def function(self):
        return self._site.function

    @property
    def line(self):
        return self._site.line

    @property
    def stack(self):
        return self._stack

    def unwrap(self):
        return self._cause

    def location(self, with_stack=True):
        site = self._site
        text = SITE_PATTERN.format(site.file, site.line, site.function)
        if with_stack:
            text += STACK_PATTERN.format(self._stack)
        return text

    def message(self):
        return "{} {}; {}".format(STR_CODE_LOCATION, self.location(), self._cause)

    def detail(self):
        lines = [STR_CODE_LOCATION, self.location(with_stack=False)]
        if self._stack:
            lines.append("Stack (most recent call last):")
            lines.append(self._stack.rstrip("\n"))
        if self._cause is None:
            lines.append(CAUSE_PREFIX + "None")
        for cause in causes(self):
            lines.append(CAUSE_PREFIX + _describe(cause))
        return "\n".join(lines)

    def __str__(self):
        return self.message()

    def __repr__(self):
        return "{}(cause={!r}, file={!r}, line={!r}, function={!r})".format(
            type(self).__name__, self._cause, self.file, self.line, self.function
        )


def _describe(cause):
    if isinstance(cause, SourceError):
        return "{}: {}".format(type(cause).__name__, cause.location(with_stack=False))
    if isinstance(cause, BaseException):
        return "".join(traceback.format_exception_only(type(cause), cause)).rstrip("\n")
    return repr(cause)


def _wrap(cause, skip_lines, stacklevel, config, inspector, with_stack):
    if config is None:
        config = get_config()
    if config.no_debug:
        trace("wrap({!r}): no_debug is set, passing through", cause)
        return cause
    if inspector is None:
        inspector = _inspector

    # Frames above _wrap: the public function, then its caller.
    depth = max(stacklevel, 1) + 1
    site = inspector.call_site(depth)
    if site is None:
        logger.debug(
            "No caller information %d frame(s) up, wrapping %r without a location",
            stacklevel,
            cause,
        )
        site = CallSite.EMPTY
    else:
        site = site.adjusted(skip_lines)

    stack = ""
    if with_stack and not config.no_stack:
        stack = inspector.capture_stack(depth)

    trace("wrap({!r}): {!s}:{!s} in {!s}", cause, site.file, site.line, site.function)
    return SourceError(cause, site, stack)


def source_error(cause, skip_lines=0, *, stacklevel=1, config=None, inspector=None):
    """
    Wrap ``cause`` with the file, line and function of the caller, plus the call stack.

    ``skip_lines`` moves the reported line up, e.g. to point at the statement that
    failed rather than the line doing the wrapping. It's ignored if it would go past the
    top of the file.

    ``stacklevel`` works like it does in ``warnings.warn``: 1 reports the immediate caller,
    2 the caller's caller, which lets a small helper report its user's location.
    Values below 1 are treated as 1.

    If the ``no_debug`` switch is on, ``cause`` is returned untouched. If the location
    can't be determined, the result is still a ``SourceError``, with an empty location.

    >>> exc = ValueError("disk full")
    >>> err = source_error(exc)
    >>> err.unwrap() is exc
    True
    >>> str(err).endswith("; disk full")
    True
    """
    return _wrap(cause, skip_lines, stacklevel, config, inspector, with_stack=True)


def code_error(cause, skip_lines=0, *, stacklevel=1, config=None, inspector=None):
    """
    Like ``source_error``, but never captures the stack: only file, line and function.
    """
    return _wrap(cause, skip_lines, stacklevel, config, inspector, with_stack=False)
