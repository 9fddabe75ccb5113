import sys

from source_error import CallSite


def here():
    "The line number of the caller."
    return sys._getframe(1).f_lineno


class FakeInspector:
    """
    Returns a fixed call site and stack, and records the depths it was asked for.

    Pass ``site=None`` to act like a runtime that can't report the caller.
    """

    def __init__(
        self,
        site=CallSite(file="/srv/app/report.py", function="app.report.write", line=42),
        stack="fake stack\n",
    ):
        self.site = site
        self.stack = stack
        self.depths = []

    def call_site(self, depth=0):
        self.depths.append(depth)
        return self.site

    def capture_stack(self, depth=0):
        self.depths.append(depth)
        return self.stack
