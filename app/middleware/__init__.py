"""HTTP middleware: request ID and unhandled error envelope.

Applied in main app; the last middleware added is the outermost.
Import and use from app.main.
"""

from app.middleware.request_id import RequestIDMiddleware
from app.middleware.unhandled_errors import UnhandledErrorMiddleware

__all__ = [
    "RequestIDMiddleware",
    "UnhandledErrorMiddleware",
]
