"""
Post embed component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from siteviews.core.entities import Author, Post

# --- Input Models ---


@dataclass(frozen=True)
class RenderPostInput:
    """Input for rendering a post embed."""

    author: Author
    post: Post


# --- Output Models ---


@dataclass(frozen=True)
class RenderPostOutput:
    """Output containing the rendered post."""

    html: str
    verified: bool = False
    attachment_count: int = 0
    success: bool = True
