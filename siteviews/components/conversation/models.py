"""
Conversation component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class ConversationInput:
    """Input for rendering a character aside."""

    name: str
    mood: str
    body_html: str


@dataclass(frozen=True)
class StickerInput:
    """Input for rendering a standalone sticker."""

    name: str
    mood: str


# --- Output Models ---


@dataclass(frozen=True)
class FragmentOutput:
    """Rendered HTML fragment."""

    html: str
    success: bool = True
