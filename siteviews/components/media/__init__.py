"""
Media component - static pictures, hero images, slides and videos.
"""

from ._impl import (
    DEFAULT_MEDIA_CONFIG,
    MediaConfig,
    render_hero,
    render_picture,
    render_slide,
    render_video,
)
from .component import build_config, run
from .models import HeroInput, PictureInput, SlideInput, VideoInput
from .ports import RulesPort

__all__ = [
    "run",
    "build_config",
    "HeroInput",
    "PictureInput",
    "SlideInput",
    "VideoInput",
    "RulesPort",
    "DEFAULT_MEDIA_CONFIG",
    "MediaConfig",
    "render_hero",
    "render_picture",
    "render_slide",
    "render_video",
]
