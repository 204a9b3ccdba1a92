"""
Post embed renderer - fediverse posts as self-contained HTML.

Renders the author heading (avatar, name, trust badge, handle, timestamp)
and the post body (attachments, text, permalink), optionally gated behind
a content warning.

Trust boundary: post.body_html is inserted verbatim. Whoever supplies the
post must have sanitized it. Every other value is escaped here.

Key behaviors:
- Attachments dispatch on media type prefix; unknown kinds render nothing
- Any attachment at all adds a line break after the attachment block
- A content warning wraps the whole body in a collapsed <details>
- The verified badge appears only for the trusted identity
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass

from siteviews.core.entities import Attachment, Author, Post

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class PostEmbedConfig:
    """Post rendering configuration."""

    trusted_identity: str = "https://pony.social/users/cadey"
    verified_badge_url: str = "https://cdn.xeiaso.net/file/christine-static/blog/verified.png"
    verified_marker: str = ":verified:"
    timestamp_format: str = "M%m %d %Y %H:%M (UTC)"
    missing_description: str = "no description provided"
    video_fallback_text: str = "Your browser does not support the video tag, see this URL: "
    permalink_text: str = "Link"


DEFAULT_POST_EMBED_CONFIG = PostEmbedConfig()


def _escape(text: str) -> str:
    """Escape HTML special characters."""
    return html.escape(text)


# --- Attachment Renderers ---


def render_image_attachment(
    attachment: Attachment,
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """Render an image attachment as a link to itself."""
    url = _escape(attachment.url)
    alt = _escape(attachment.description or config.missing_description)
    return f'<a href="{url}"><img width="100%" height="100%" src="{url}" alt="{alt}"></a>'


def render_video_attachment(
    attachment: Attachment,
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """Render a video attachment with a link for browsers without <video>."""
    url = _escape(attachment.url)
    media_type = _escape(attachment.media_type)
    fallback = _escape(config.video_fallback_text)
    return (
        '<video width="100%" height="100%" controls>'
        f'<source src="{url}" type="{media_type}">'
        f'{fallback}<a href="{url}">{url}</a>'
        "</video>"
    )


ATTACHMENT_RENDERERS = {
    "image/": render_image_attachment,
    "video/": render_video_attachment,
}


def render_attachment(
    attachment: Attachment,
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """Render one attachment, or nothing for unsupported media types."""
    for prefix, renderer in ATTACHMENT_RENDERERS.items():
        if attachment.media_type.startswith(prefix):
            return renderer(attachment, config)

    logger.debug("Skipping unsupported attachment type %s", attachment.media_type)
    return ""


def render_attachments(
    attachments: list[Attachment],
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """Render the attachment block, with its trailing line break."""
    if not attachments:
        return ""

    # Break follows even when nothing above it rendered
    return "".join(render_attachment(att, config) for att in attachments) + "<br>"


# --- Post Parts ---


def format_timestamp(post: Post, config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG) -> str:
    """Format the publish time, e.g. "M03 14 2023 09:26 (UTC)"."""
    return post.published_utc.strftime(config.timestamp_format)


def is_trusted(author: Author, config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG) -> bool:
    """Whether the author is the one identity that gets a verified badge."""
    return author.id == config.trusted_identity


def render_heading(
    author: Author,
    post: Post,
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """Render name, badge, handle and timestamp."""
    name = _escape(author.name.replace(config.verified_marker, ""))

    badge = ""
    if is_trusted(author, config):
        badge = f'<img class="verified" src="{_escape(config.verified_badge_url)}">'

    return (
        '<div class="media-heading">'
        f"{name}{badge} "
        f'<a href="{_escape(author.url)}">@{_escape(author.handle)}</a>'
        "<br>"
        f"{_escape(format_timestamp(post, config))}"
        "</div>"
    )


def render_body(post: Post, config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG) -> str:
    """Render attachments, text and permalink."""
    attachments = render_attachments(post.attachments, config)
    permalink = f'<a href="{_escape(post.permalink)}">{_escape(config.permalink_text)}</a>'
    return f"{attachments}{post.body_html}{permalink}"


def render_content(post: Post, config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG) -> str:
    """Render the body, behind a collapsed disclosure if the post has a warning."""
    body = render_body(post, config)

    if post.content_warning is not None:
        summary = _escape(post.content_warning)
        return f"<details><summary>{summary}</summary>{body}</details>"

    return body


# --- Main Rendering Function ---


def render_post(
    author: Author,
    post: Post,
    config: PostEmbedConfig = DEFAULT_POST_EMBED_CONFIG,
) -> str:
    """
    Render a post embed.

    Args:
        author: Who wrote the post.
        post: The post; body_html must already be sanitized.
        config: Badge, timestamp and copy settings.

    Returns:
        HTML fragment.
    """
    avatar_alt = _escape(f"the profile picture for {author.handle}")

    return (
        '<div class="media">'
        '<div class="media-left">'
        '<div class="avatarholder">'
        f'<img src="{_escape(author.avatar_url)}" alt="{avatar_alt}">'
        "</div>"
        "</div>"
        '<div class="media-body">'
        f"{render_heading(author, post, config)}"
        f'<div class="media-content">{render_content(post, config)}</div>'
        "</div>"
        "</div>"
    )
