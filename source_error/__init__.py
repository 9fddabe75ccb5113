"""
The source error library wraps a failure with the file, line and function where it was
observed, and optionally the call stack, so that a logged error can be traced back to its
origin without annotating every error site by hand.

    from source_error import source_error

    try:
        write_report()
    except OSError as exc:
        raise source_error(exc) from exc

Two process-wide switches control the cost; see ``configure``.
"""

from .errors import SourceError, source_error, code_error  # noqa
from .config import (  # noqa
    Config,
    get_config,
    set_config,
    configure,
    configured,
)
from .frames import CallSite, FrameInspector  # noqa
from .chain import unwrap, causes, root_cause, find_cause  # noqa
from .helpers import STR_CODE_LOCATION, set_trace  # noqa
