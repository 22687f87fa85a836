# 📄 File: app/modules/knowledge/presentation/api/v1/share.py
# 🧭 Purpose (Layman Explanation):
# The web addresses that social networks visit when someone shares a knowledge article.
# They return a preview page that sends real visitors straight on to the article.
# 🧪 Purpose (Technical Summary):
# Share-link resolver routes: Open Graph HTML with redirect for GET /share/article and
# JSON per-platform share links for GET /share/article/links.
# 🔗 Dependencies:
# FastAPI, app.modules.knowledge (service, rendering, dependencies)
# 🔄 Connected Modules / Calls From:
# app.main.py (router registration)

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response

from app.modules.knowledge.domain.services.share_service import ShareService
from app.modules.knowledge.presentation.dependencies import get_share_service
from app.modules.knowledge.presentation.rendering import render_share_page

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/share", tags=["Share"])


@router.get(
    "/article",
    response_class=HTMLResponse,
    summary="Article share page",
    description="Open Graph preview of a knowledge article that redirects to its canonical page",
)
def article_share_page(
    article_id: Optional[str] = Query(None, alias="id"),
    service: ShareService = Depends(get_share_service),
) -> Response:
    if not article_id:
        return PlainTextResponse("Missing article id", status_code=status.HTTP_400_BAD_REQUEST)

    resolution = service.resolve(article_id)
    logger.info(
        f"Share page for id={article_id!r} "
        f"({'fallback' if resolution.from_fallback else 'article'})"
    )

    return HTMLResponse(
        content=render_share_page(resolution.payload),
        headers={"Cache-Control": resolution.cache_control},
    )


@router.get(
    "/article/links",
    summary="Article share links",
    description="Facebook, X and LINE share links pointing at the article share page",
)
def article_share_links(
    article_id: Optional[str] = Query(None, alias="id"),
    title: Optional[str] = Query(None),
    service: ShareService = Depends(get_share_service),
) -> JSONResponse:
    if not article_id:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Missing article id"},
        )

    targets = service.share_targets(article_id, title)
    return JSONResponse(content=targets.model_dump(by_alias=True))
