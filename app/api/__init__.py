# 📄 File: app/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the api folder as a Python package holding the versioned API routes and the
# helpers that run around every request.
# 🧪 Purpose (Technical Summary):
# Package initialization for the API layer (v1 router, middleware).
# 🔗 Dependencies:
# None (package initialization)
# 🔄 Connected Modules / Calls From:
# app.main.py
