"""
Media component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from siteviews.components.hydration import RulesPort as HydrationRulesPort


class RulesPort(HydrationRulesPort, Protocol):
    """Port for accessing CDN layout configuration."""

    def get_hero_dir(self) -> str:
        """Get the hero image directory under the CDN base."""
        ...

    def get_talks_dir(self) -> str:
        """Get the talk slide directory under the CDN base."""
        ...
