"""
Rules adapter - serves component rules ports from a loaded rules file.

One adapter satisfies the RulesPort of every component, so callers load
rules.yaml once and pass the adapter wherever rules are accepted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from siteviews.rules.loader import load_rules
from siteviews.rules.models import SiteRules


class SiteRulesAdapter:
    """Adapter exposing SiteRules through the component ports."""

    def __init__(self, rules: SiteRules) -> None:
        self._rules = rules

    @classmethod
    def from_path(cls, path: Path) -> SiteRulesAdapter:
        """Load rules from a YAML file."""
        return cls(load_rules(path))

    @property
    def rules(self) -> SiteRules:
        return self._rules

    # --- Conversation ---

    def get_static_base_url(self) -> str:
        return self._rules.cdn.static_base_url

    def get_stickers_dir(self) -> str:
        return self._rules.cdn.stickers_dir

    def get_characters_path(self) -> str:
        return self._rules.characters.characters_path

    def get_sticker_max_height(self) -> str:
        return self._rules.characters.sticker_max_height

    # --- Hydration ---

    def get_widget_base_path(self) -> str:
        return self._rules.hydration.widget_base_path

    def get_widget_extension(self) -> str:
        return self._rules.hydration.widget_extension

    def get_cache_buster_param(self) -> str:
        return self._rules.hydration.cache_buster_param

    def get_noscript_notice(self) -> tuple[str, str, str]:
        notice = self._rules.hydration.noscript
        return notice.speaker, notice.mood, notice.message

    # --- Post embeds ---

    def get_trusted_identity(self) -> str:
        return self._rules.posts.trusted_identity

    def get_verified_badge_url(self) -> str:
        return self._rules.posts.verified_badge_url

    def get_post_copy(self) -> dict[str, Any]:
        return self._rules.posts.model_dump(
            include={
                "verified_marker",
                "timestamp_format",
                "missing_description",
                "video_fallback_text",
                "permalink_text",
            }
        )

    # --- Media ---

    def get_hero_dir(self) -> str:
        return self._rules.cdn.hero_dir

    def get_talks_dir(self) -> str:
        return self._rules.cdn.talks_dir

    # --- Notices ---

    def get_ad_config(self) -> dict[str, Any]:
        return self._rules.ads.model_dump()

    def get_talk_config(self) -> dict[str, Any]:
        return self._rules.talks.model_dump()
