# 📄 File: app/modules/knowledge/__init__.py
# 🧭 Purpose (Layman Explanation):
# Groups everything needed to turn a knowledge article link into a nice preview card
# when someone shares it on Facebook, X or LINE.
# 🧪 Purpose (Technical Summary):
# Package initialization for the knowledge module: article summaries read from Supabase,
# share payload resolution, and Open Graph HTML rendering.
# 🔗 Dependencies:
# FastAPI, supabase, jinja2, pydantic
# 🔄 Connected Modules / Calls From:
# app.main.py (router registration)

"""
Knowledge Module

Architecture follows the same layering as the rest of the application:
- Domain: article summary and share payload models, resolution service
- Infrastructure: Supabase-backed article repository
- Presentation: share page rendering and HTTP routes
"""
