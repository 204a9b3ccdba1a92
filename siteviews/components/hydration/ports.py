"""
Hydration component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from siteviews.components.conversation import RulesPort as ConversationRulesPort


class RulesPort(ConversationRulesPort, Protocol):
    """Port for accessing widget hosting and no-script notice configuration."""

    def get_widget_base_path(self) -> str:
        """Get the path widget modules are served from (with trailing slash)."""
        ...

    def get_widget_extension(self) -> str:
        """Get the widget module file extension."""
        ...

    def get_cache_buster_param(self) -> str:
        """Get the query parameter carrying the mount id."""
        ...

    def get_noscript_notice(self) -> tuple[str, str, str]:
        """Get (speaker, mood, message) for the no-script notice."""
        ...
