"""A simple stop watch for timing code sections."""

import logging
import time

logger = logging.getLogger(__name__)


class StopWatch:
    """Measures wall-clock time, accumulating over resumed intervals."""

    def __init__(self):
        self._start_time = 0.0
        self._elapsed = 0.0
        self._running = False

    def start(self):
        """Reset the accumulated time and start measuring."""
        self._elapsed = 0.0
        self.resume()

    def resume(self):
        """Continue measuring, adding to the time accumulated so far."""
        self._start_time = time.perf_counter()
        self._running = True

    def stop(self):
        """Stop measuring and return the watch itself."""
        self._elapsed += time.perf_counter() - self._start_time
        self._running = False
        return self

    def elapsed(self):
        """Return the accumulated time in milliseconds."""
        if self._running:
            logger.warning("StopWatch: stop timer before calling elapsed()")
        return 1000.0 * self._elapsed

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *args):
        self.stop()

    def __str__(self):
        return f"{self.elapsed()} ms"