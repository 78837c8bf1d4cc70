"""Real Time implementation using the time module."""

import time

from urlspawn.gateway.time.abc import Time

# time.sleep() rejects very large values with EINVAL, so long sleeps are
# split into chunks of at most one day.
MAX_SLEEP_CHUNK_SECONDS = 24 * 60 * 60.0


class RealTime(Time):
    """Production implementation that really sleeps."""

    def sleep(self, seconds: float) -> None:
        remaining = seconds
        while remaining > 0:
            chunk = min(remaining, MAX_SLEEP_CHUNK_SECONDS)
            time.sleep(chunk)
            remaining -= chunk
