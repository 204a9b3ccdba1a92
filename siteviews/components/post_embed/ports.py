"""
Post embed component port definitions.
"""

from __future__ import annotations

from typing import Any, Protocol


class RulesPort(Protocol):
    """Port for accessing post rendering configuration."""

    def get_trusted_identity(self) -> str:
        """Get the actor id that receives the verified badge."""
        ...

    def get_verified_badge_url(self) -> str:
        """Get the verified badge image URL."""
        ...

    def get_post_copy(self) -> dict[str, Any]:
        """Get marker, timestamp format and fallback texts."""
        ...
