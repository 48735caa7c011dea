"""Memory usage of the running process."""

import logging
import mmap
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None

logger = logging.getLogger(__name__)

_PLATFORM = sys.platform
_STATM_PATH = "/proc/self/statm"


def max_size():
    """Return the peak resident set size of the process in bytes.

    Returns 0 where the platform offers no way to query it.
    """
    if resource is None:
        return 0
    peak = int(resource.getrusage(resource.RUSAGE_SELF).ru_maxrss)
    if _PLATFORM == "darwin":
        return peak
    if _PLATFORM.startswith("linux"):
        return peak * 1024
    return 0


def current_size():
    """Return the current resident set size of the process in bytes.

    Returns 0 where the platform offers no way to query it or the
    query fails.
    """
    if not _PLATFORM.startswith("linux"):
        return 0
    try:
        with open(_STATM_PATH, encoding="ascii") as statm:
            fields = statm.read().split()
    except OSError:
        logger.error("Failed to read process information file")
        return 0
    try:
        rss = int(fields[1])
    except (IndexError, ValueError):
        logger.error("Failed to retrieve RSS information")
        return 0
    return rss * mmap.PAGESIZE