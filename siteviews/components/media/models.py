"""
Media component input models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PictureInput:
    """A CDN picture path, without extension."""

    path: str


@dataclass(frozen=True)
class HeroInput:
    """A hero image with optional generator prompt and name."""

    file: str
    prompt: str | None = None
    ai: str | None = None


@dataclass(frozen=True)
class SlideInput:
    """A talk slide."""

    name: str
    essential: bool = True


@dataclass(frozen=True)
class VideoInput:
    """A CDN video path."""

    path: str
