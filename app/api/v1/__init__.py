# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the service's own operational API (health checks).
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1.
# 🔗 Dependencies:
# FastAPI
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

__api_version__ = "v1"
