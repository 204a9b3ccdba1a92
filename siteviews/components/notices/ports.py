"""
Notices component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol

from siteviews.components.hydration import RulesPort as HydrationRulesPort


class RulesPort(HydrationRulesPort, Protocol):
    """Port for accessing ad and talk notice configuration."""

    def get_ad_config(self) -> dict[str, Any]:
        """Get ad network script, publisher, placement and speaker."""
        ...

    def get_talk_config(self) -> dict[str, Any]:
        """Get talk warning speaker, widget and message."""
        ...
