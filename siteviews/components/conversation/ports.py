"""
Conversation component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing sticker and character configuration."""

    def get_static_base_url(self) -> str:
        """Get the static asset CDN base URL (with trailing slash)."""
        ...

    def get_stickers_dir(self) -> str:
        """Get the sticker directory under the CDN base."""
        ...

    def get_characters_path(self) -> str:
        """Get the path of the characters page."""
        ...

    def get_sticker_max_height(self) -> str:
        """Get the CSS max-height for conversation stickers."""
        ...
