# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Holds the helpers that run around every request, such as the request diary.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components.
# 🔗 Dependencies:
# starlette middleware
# 🔄 Connected Modules / Calls From:
# app.main.py middleware registration

from .logging import RequestLoggingMiddleware

__all__ = ["RequestLoggingMiddleware"]
