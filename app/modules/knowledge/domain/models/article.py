# 📄 File: app/modules/knowledge/domain/models/article.py
# 🧭 Purpose (Layman Explanation):
# Describes the small slice of a knowledge article needed for a share preview, and the
# preview itself (title, description, picture, and where the link should go).
# 🧪 Purpose (Technical Summary):
# Domain models for the read-only article summary fetched from Supabase and the
# request-scoped share payload derived from it.
# 🔗 Dependencies:
# pydantic, typing
# 🔄 Connected Modules / Calls From:
# share_service.py, article_repository.py, article_repository_impl.py, share routes

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Columns read for a share preview
ARTICLE_SUMMARY_COLUMNS = (
    "id",
    "slug",
    "title",
    "meta_title",
    "meta_description",
    "og_title",
    "og_description",
    "og_image",
    "image_url",
    "image_alt",
    "published",
)


class ArticleSummary(BaseModel):
    """
    Read-only view of a row in ``knowledge_articles``.

    Only published articles are eligible for share previews; the
    repository filters on ``published`` before building one of these.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    slug: Optional[str] = None
    title: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    og_title: Optional[str] = None
    og_description: Optional[str] = None
    og_image: Optional[str] = None
    image_url: Optional[str] = None
    image_alt: Optional[str] = None
    published: bool = True

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v):
        return v if isinstance(v, str) else str(v)


class SharePayload(BaseModel):
    """Everything the share page needs; values are raw and escaped at render time."""

    title: str
    description: str
    image: str
    image_alt: str
    article_url: str


class ShareResolution(BaseModel):
    """A resolved share payload plus the caching policy it should be served with."""

    payload: SharePayload
    cache_control: str
    from_fallback: bool = False


class ShareTargets(BaseModel):
    """Per-platform share links for an article."""

    model_config = ConfigDict(populate_by_name=True)

    share_url: str = Field(serialization_alias="shareUrl")
    facebook: str
    twitter: str
    line: str
