# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Collects the version 1 operational routes in one place so the app can mount them together.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation; module routers with fixed public paths (share pages,
# LINE bridge) are mounted directly in app.main.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health
# 🔄 Connected Modules / Calls From:
# app.main.py

from fastapi import APIRouter

from .health import health_router

api_v1_router = APIRouter()

api_v1_router.include_router(
    health_router,
    tags=["Health Check"]
)
