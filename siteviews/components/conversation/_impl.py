"""
Conversation asides - character stickers with a chat line.

The same aside is reused by the hydration no-script notice, the ad nag
and the talk warning, so it takes pre-rendered HTML as its body.

Functional Core - pure rendering.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

# --- Configuration ---


@dataclass(frozen=True)
class ConversationConfig:
    """Where stickers and character pages live."""

    static_base_url: str = "https://cdn.xeiaso.net/file/christine-static/"
    stickers_dir: str = "stickers"
    characters_path: str = "/characters"
    sticker_max_height: str = "4.5rem"


DEFAULT_CONVERSATION_CONFIG = ConversationConfig()


def _escape(text: str) -> str:
    """Escape HTML special characters."""
    return html.escape(text)


def sticker_base(name: str, mood: str, config: ConversationConfig) -> str:
    """Sticker URL without extension, e.g. .../stickers/cadey/coffee."""
    return f"{config.static_base_url}{config.stickers_dir}/{name.lower()}/{mood}"


def _sticker_picture(
    name: str,
    mood: str,
    config: ConversationConfig,
    *,
    alt_name: str | None = None,
    img_attrs: str = "",
) -> str:
    base = _escape(sticker_base(name, mood, config))
    alt = _escape(f"{alt_name or name} is {mood}")
    return (
        "<picture>"
        f'<source type="image/avif" srcset="{base}.avif">'
        f'<source type="image/webp" srcset="{base}.webp">'
        f'<img{img_attrs} alt="{alt}" src="{base}.png">'
        "</picture>"
    )


# --- Renderers ---


def render_conversation(
    name: str,
    mood: str,
    body_html: str,
    config: ConversationConfig = DEFAULT_CONVERSATION_CONFIG,
) -> str:
    """
    Render a character aside.

    Args:
        name: Character name; underscores display as spaces.
        mood: Sticker mood, e.g. "coffee".
        body_html: Already-rendered HTML for the chat line.
        config: Sticker and character page locations.

    Returns:
        HTML fragment.
    """
    display_name = _escape(name.replace("_", " "))
    anchor = _escape(f"{config.characters_path}#{name.lower()}")
    max_height = _escape(config.sticker_max_height)

    picture = _sticker_picture(
        name,
        mood,
        config,
        alt_name=name.replace("_", " "),
        img_attrs=f' style="max-height:{max_height}" loading="lazy"',
    )

    return (
        '<div class="conversation">'
        f'<div class="conversation-standalone">{picture}</div>'
        '<div class="conversation-chat">'
        f'&lt;<a href="{anchor}"><b>{display_name}</b></a>&gt; {body_html}'
        "</div>"
        "</div>"
    )


def render_sticker(
    name: str,
    mood: str,
    config: ConversationConfig = DEFAULT_CONVERSATION_CONFIG,
) -> str:
    """Render a standalone centered sticker."""
    return f"<center>{_sticker_picture(name, mood, config)}</center>"
