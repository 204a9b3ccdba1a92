"""
Preview API Routes - render fragments in isolation.

Lets widget props and archived posts be checked against the exact markup
the site build will emit.
"""

from __future__ import annotations

import html
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from siteviews.adapters.rules_adapter import SiteRulesAdapter
from siteviews.api.deps import get_rules
from siteviews.components.conversation import ConversationInput, run_conversation
from siteviews.components.hydration import HydrationError, MountInput, run_mount
from siteviews.components.post_embed import RenderPostInput, run_render
from siteviews.core.entities import Author, Post

router = APIRouter()


# --- Request/Response Models ---


class PostPreviewRequest(BaseModel):
    """Request to preview a post embed."""

    author: Author
    post: Post
    wrap_in_page: bool = Field(default=False, description="Wrap in a minimal HTML document")


class PostPreviewResponse(BaseModel):
    """Rendered post embed."""

    html: str
    verified: bool
    attachment_count: int


class MountPreviewRequest(BaseModel):
    """Request to preview a widget mount."""

    widget_name: str = Field(..., description="Client widget module name")
    props: Any = Field(default=None, description="JSON props for the widget")


class MountPreviewResponse(BaseModel):
    """Rendered widget mount."""

    html: str
    mount_id: str
    module_url: str


# --- Helper Functions ---


def wrap_page(title: str, body: str) -> str:
    """Wrap a fragment in a minimal HTML document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{html.escape(title)}</title>
</head>
<body>
    {body}
</body>
</html>"""


# --- Routes ---


@router.post("/post", response_model=PostPreviewResponse)
def preview_post(
    request: PostPreviewRequest,
    rules: SiteRulesAdapter = Depends(get_rules),
) -> PostPreviewResponse:
    """Preview a post embed."""
    output = run_render(RenderPostInput(author=request.author, post=request.post), rules=rules)

    body = output.html
    if request.wrap_in_page:
        body = wrap_page(f"Post by @{request.author.handle}", body)

    return PostPreviewResponse(
        html=body,
        verified=output.verified,
        attachment_count=output.attachment_count,
    )


@router.post("/mount", response_model=MountPreviewResponse)
def preview_mount(
    request: MountPreviewRequest,
    rules: SiteRulesAdapter = Depends(get_rules),
) -> MountPreviewResponse:
    """
    Preview a widget mount.

    Bad widget names and props that are not valid JSON values return 422.
    """
    try:
        output = run_mount(MountInput(request.widget_name, request.props), rules=rules)
    except HydrationError as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e

    return MountPreviewResponse(
        html=output.html,
        mount_id=output.widget.mount_id,
        module_url=output.widget.module_url,
    )


@router.get("/conversation/{name}/{mood}", response_class=HTMLResponse)
def preview_conversation(
    name: str,
    mood: str,
    message: str = "",
    rules: SiteRulesAdapter = Depends(get_rules),
) -> HTMLResponse:
    """Preview a character aside with a plain-text message."""
    output = run_conversation(ConversationInput(name, mood, html.escape(message)), rules=rules)
    return HTMLResponse(content=output.html, status_code=200)
