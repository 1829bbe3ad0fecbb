# 📄 File: my_garden/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Helpers that look at every request on its way in and out (currently: the request log).

from .logging import RequestLoggingMiddleware

# Paths not worth a log line per hit
EXCLUDED_LOGGING_PATHS = {"/favicon.ico"}

__all__ = ["EXCLUDED_LOGGING_PATHS", "RequestLoggingMiddleware"]
