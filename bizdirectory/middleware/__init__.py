"""HTTP middleware: timeout and request ID.

Applied in main app; last added is outermost.
"""

from bizdirectory.middleware.request_id import RequestIDMiddleware
from bizdirectory.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]
