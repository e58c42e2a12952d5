r"""Default configuration values used by the HTTP helpers."""

from __future__ import annotations

__all__ = [
    "DEFAULT_FIRST_WAIT",
    "DEFAULT_MAX_JITTER_MILLIS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRY_STATUS_CODES",
]

from datetime import timedelta

# Default timeout in seconds for HTTP requests
DEFAULT_TIMEOUT = 10.0

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 3

# Wait before the first retry of the default exponential distribution
# With 10ms: 1st retry waits 10ms, 2nd waits 100ms, 3rd waits 1s
DEFAULT_FIRST_WAIT = timedelta(milliseconds=10)

# Upper bound of the random extra delay added to each wait
DEFAULT_MAX_JITTER_MILLIS = 100

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)
