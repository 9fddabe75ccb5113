import logging
import sys

logger = logging.getLogger(__package__)
TRACE = 5
python_minor = sys.version_info[:2]

# The constant label that starts every rendered SourceError.
STR_CODE_LOCATION = "error in source"
SITE_PATTERN = "File: {!r}, Line: {:d}, Function: {!r}."
STACK_PATTERN = " Stack: {}"
CAUSE_PREFIX = "Caused by: "


def trace(fmt, *args, _logger=logger, _TRACE=TRACE):
    "Trace a log message. Avoids issues with applications setting `style`."
    if _logger.isEnabledFor(_TRACE):
        _logger.log(_TRACE, fmt.format(*args))


def set_trace(enabled=True):
    logger.setLevel(TRACE if enabled else logging.WARNING)
