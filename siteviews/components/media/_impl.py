"""
Static media markup - pictures, hero images, talk slides and videos.

Images come from the static CDN in three encodings: avif and webp
sources with a "-smol.png" fallback.

Functional Core - pure rendering.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from siteviews.components.hydration import (
    DEFAULT_HYDRATION_CONFIG,
    HydrationConfig,
    mount,
)

# --- Configuration ---


@dataclass(frozen=True)
class MediaConfig:
    """CDN layout for static media."""

    static_base_url: str = "https://cdn.xeiaso.net/file/christine-static/"
    hero_dir: str = "hero"
    talks_dir: str = "talks"
    default_ai: str = "MidJourney"
    video_widget: str = "Video"


DEFAULT_MEDIA_CONFIG = MediaConfig()


def _escape(text: str) -> str:
    """Escape HTML special characters."""
    return html.escape(text)


def _sources(base: str) -> str:
    base = _escape(base)
    return (
        f'<source type="image/avif" srcset="{base}.avif">'
        f'<source type="image/webp" srcset="{base}.webp">'
    )


# --- Renderers ---


def render_picture(path: str, config: MediaConfig = DEFAULT_MEDIA_CONFIG) -> str:
    """Render a CDN picture linking to its full-size jpg."""
    base = f"{config.static_base_url}{path}"
    alt = _escape(f"hero image {path}")
    return (
        f'<a href="{_escape(base)}.jpg" target="_blank">'
        '<picture class="picture" style="margin:0">'
        f"{_sources(base)}"
        f'<img class="picture" style="padding:0" loading="lazy" alt="{alt}" '
        f'src="{_escape(base)}-smol.png">'
        "</picture>"
        "</a>"
    )


def render_hero(
    file: str,
    prompt: str | None = None,
    ai: str | None = None,
    config: MediaConfig = DEFAULT_MEDIA_CONFIG,
) -> str:
    """
    Render a hero image with its og:image tag and caption.

    The caption names the image generator, followed by the prompt if given.
    """
    base = f"{config.static_base_url}{config.hero_dir}/{file}"
    alt = _escape(f"hero image {file}")
    caption = _escape(ai or config.default_ai)
    if prompt is not None:
        caption += f" -- {_escape(prompt)}"

    return (
        f'<meta property="og:image" content="{_escape(base)}-smol.png">'
        '<figure class="hero" style="margin:0">'
        '<picture style="margin:0">'
        f"{_sources(base)}"
        f'<img style="padding:0" loading="lazy" alt="{alt}" '
        f'src="{_escape(base)}-smol.png">'
        "</picture>"
        f"<figcaption>{caption}</figcaption>"
        "</figure>"
    )


def render_slide(name: str, essential: bool, config: MediaConfig = DEFAULT_MEDIA_CONFIG) -> str:
    """Render a talk slide; non-essential slides can be hidden client-side."""
    base = f"{config.static_base_url}{config.talks_dir}/{name}"
    kind = "xeblog-slides-essential" if essential else "xeblog-slides-fluff"
    return (
        f'<div class="hero {kind}">'
        '<picture style="margin:0">'
        f"{_sources(base)}"
        f'<img style="padding:0" loading="lazy" src="{_escape(base)}-smol.png">'
        "</picture>"
        "</div>"
    )


def render_video(
    path: str,
    config: MediaConfig = DEFAULT_MEDIA_CONFIG,
    hydration: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> str:
    """Mount the video player widget for a CDN path."""
    return mount(config.video_widget, {"path": path}, hydration)
