# 📄 File: app/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the sign-in pieces of the service: turning a LINE sign-in into tokens and a profile
# the Petskub website can use.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (LINE OAuth token bridge).
# 🔗 Dependencies:
# FastAPI, httpx, pydantic
# 🔄 Connected Modules / Calls From:
# app.main.py (router registration)

"""
User Management Module

Architecture follows the same layering as the rest of the application:
- Domain: OAuth exchange result models
- Infrastructure: LINE Login provider
- Presentation: LINE bridge endpoints and request schemas
"""
