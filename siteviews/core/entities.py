"""
Domain entities for the fragment renderers.

Authors, posts and attachments arrive already loaded from the content
store (a fediverse archive). They are pydantic models so raw JSON can be
validated before it reaches a renderer; the renderers themselves assume
valid input.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

__all__ = [
    "Attachment",
    "Author",
    "Post",
]


class Author(BaseModel):
    """Display identity for a post."""

    id: str  # Actor URL, compared against the trusted identity
    name: str = Field(min_length=1)
    handle: str = Field(min_length=1)  # preferred_username, without the leading @
    url: str  # Profile page
    avatar_url: str


class Attachment(BaseModel):
    """
    Media attached to a post.

    Only the media type prefix ("image/", "video/") decides how it renders.
    """

    media_type: str
    url: str
    description: str | None = None

    @property
    def kind(self) -> str:
        """Top-level media kind, e.g. "image" for "image/png"."""
        return self.media_type.split("/", 1)[0]


class Post(BaseModel):
    """
    A single post with its attachments.

    Invariants:
    - body_html has been sanitized upstream and is inserted verbatim
    - attachments belong to this post only
    """

    id: str
    body_html: str
    published: datetime
    url: str | None = None
    content_warning: str | None = None
    attachments: list[Attachment] = Field(default_factory=list)

    @property
    def permalink(self) -> str:
        """Canonical URL, falling back to the internal id."""
        return self.url or self.id

    @property
    def published_utc(self) -> datetime:
        """Publish time in UTC. Naive timestamps are taken to be UTC already."""
        if self.published.tzinfo is None:
            return self.published.replace(tzinfo=timezone.utc)
        return self.published.astimezone(timezone.utc)
