"""
Access to the interpreter's frame introspection.

The rest of the package only talks to an "inspector": any object with a ``call_site``
and a ``capture_stack`` method. ``FrameInspector`` is the real one; tests substitute a
fake that returns fixed values.
"""

import attr
import sys
import traceback


@attr.s(frozen=True, slots=True)
class CallSite:
    """
    Where a failure was wrapped: the file, the fully-qualified function and the line.

    An empty ``CallSite`` (blank strings, line 0) stands for "location unknown".
    """

    file = attr.ib(default="")
    function = attr.ib(default="")
    line = attr.ib(default=0)

    def adjusted(self, skip_lines):
        """
        Move the reported line up by ``skip_lines``.

        The adjustment only applies if it can't take the line below 0; otherwise the
        site is returned unchanged.
        """
        if 0 < skip_lines <= self.line:
            return attr.evolve(self, line=self.line - skip_lines)
        return self


CallSite.EMPTY = CallSite()


def qualified_name(frame):
    code = frame.f_code
    # co_qualname arrived in 3.11.
    name = getattr(code, "co_qualname", code.co_name)
    module = frame.f_globals.get("__name__")
    return "{}.{}".format(module, name) if module else name


class FrameInspector:
    """
    Reads the call site and stack from live frames.

    ``depth`` counts frames above the caller of the method: 0 is the function calling
    ``call_site``, 1 is its caller, and so on.
    """

    def _frame(self, depth):
        try:
            # +2 skips _frame and the public method.
            return sys._getframe(depth + 2)
        except ValueError:
            return None

    def call_site(self, depth=0):
        frame = self._frame(depth)
        if frame is None:
            return None
        return CallSite(
            file=frame.f_code.co_filename,
            function=qualified_name(frame),
            line=frame.f_lineno,
        )

    def capture_stack(self, depth=0):
        frame = self._frame(depth)
        if frame is None:
            return ""
        return "".join(traceback.format_stack(frame))
