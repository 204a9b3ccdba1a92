"""
Post embed component - render fediverse posts.
"""

from ._impl import (
    ATTACHMENT_RENDERERS,
    DEFAULT_POST_EMBED_CONFIG,
    PostEmbedConfig,
    format_timestamp,
    is_trusted,
    render_attachment,
    render_attachments,
    render_body,
    render_content,
    render_heading,
    render_image_attachment,
    render_post,
    render_video_attachment,
)
from .component import build_config, run, run_render
from .models import RenderPostInput, RenderPostOutput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_render",
    "build_config",
    # Models
    "RenderPostInput",
    "RenderPostOutput",
    # Ports
    "RulesPort",
    # Rendering
    "ATTACHMENT_RENDERERS",
    "DEFAULT_POST_EMBED_CONFIG",
    "PostEmbedConfig",
    "format_timestamp",
    "is_trusted",
    "render_attachment",
    "render_attachments",
    "render_body",
    "render_content",
    "render_heading",
    "render_image_attachment",
    "render_post",
    "render_video_attachment",
]
