# 📄 File: app/modules/knowledge/presentation/rendering.py
# 🧭 Purpose (Layman Explanation):
# Fills in the share page template with an article's title, description and picture,
# making sure nothing typed into an article can break or hijack the page.
# 🧪 Purpose (Technical Summary):
# Jinja2 environment with autoescaping for HTML templates; renders SharePayload into the
# Open Graph / Twitter-card redirect document.
# 🔗 Dependencies:
# jinja2, pathlib, app.modules.knowledge.domain.models
# 🔄 Connected Modules / Calls From:
# app.modules.knowledge.presentation.api.v1.share

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from app.modules.knowledge.domain.models.article import SharePayload

TEMPLATES_DIR = Path(__file__).parent / "templates"
ARTICLE_SHARE_TEMPLATE = "article_share.html"


@lru_cache()
def get_template_environment() -> Environment:
    """Template environment shared by all requests; every value is HTML-escaped."""
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


def render_share_page(payload: SharePayload) -> str:
    template = get_template_environment().get_template(ARTICLE_SHARE_TEMPLATE)
    return template.render(**payload.model_dump())
