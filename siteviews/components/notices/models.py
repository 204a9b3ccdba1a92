"""
Notices component input models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AdvertiserNagInput:
    """Ad container; nag_html replaces the default aside when set."""

    nag_html: str | None = None


@dataclass(frozen=True)
class TalkWarningInput:
    """Conference talk warning. Takes no parameters."""
