"""
Post embed component - render fediverse posts.

Invariants:
- Body HTML is trusted and inserted verbatim
- Warned posts render inside a collapsed disclosure, others never do
- Permalink falls back to the internal id
"""

from __future__ import annotations

from ._impl import PostEmbedConfig, is_trusted, render_post
from .models import RenderPostInput, RenderPostOutput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> PostEmbedConfig:
    """Build post embed config from rules port."""
    if rules is None:
        return PostEmbedConfig()

    copy = rules.get_post_copy()
    return PostEmbedConfig(
        trusted_identity=rules.get_trusted_identity(),
        verified_badge_url=rules.get_verified_badge_url(),
        verified_marker=copy.get("verified_marker", ":verified:"),
        timestamp_format=copy.get("timestamp_format", "M%m %d %Y %H:%M (UTC)"),
        missing_description=copy.get("missing_description", "no description provided"),
        video_fallback_text=copy.get(
            "video_fallback_text", "Your browser does not support the video tag, see this URL: "
        ),
        permalink_text=copy.get("permalink_text", "Link"),
    )


# --- Component Entry Points ---


def run_render(
    inp: RenderPostInput,
    *,
    rules: RulesPort | None = None,
) -> RenderPostOutput:
    """
    Render a post embed.

    Args:
        inp: Author and post to render.
        rules: Optional rules port for configuration.

    Returns:
        RenderPostOutput with rendered HTML.
    """
    config = build_config(rules)

    return RenderPostOutput(
        html=render_post(inp.author, inp.post, config),
        verified=is_trusted(inp.author, config),
        attachment_count=len(inp.post.attachments),
    )


def run(
    inp: RenderPostInput,
    *,
    rules: RulesPort | None = None,
) -> RenderPostOutput:
    """Main entry point for the post embed component."""
    if isinstance(inp, RenderPostInput):
        return run_render(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
