"""
Media component - static pictures, hero images, slides and videos.
"""

from __future__ import annotations

from siteviews.components.conversation import FragmentOutput
from siteviews.components.hydration import build_config as build_hydration_config

from ._impl import (
    MediaConfig,
    render_hero,
    render_picture,
    render_slide,
    render_video,
)
from .models import HeroInput, PictureInput, SlideInput, VideoInput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> MediaConfig:
    """Build media config from rules port."""
    if rules is None:
        return MediaConfig()

    return MediaConfig(
        static_base_url=rules.get_static_base_url(),
        hero_dir=rules.get_hero_dir(),
        talks_dir=rules.get_talks_dir(),
    )


def run(
    inp: PictureInput | HeroInput | SlideInput | VideoInput,
    *,
    rules: RulesPort | None = None,
) -> FragmentOutput:
    """
    Main entry point for the media component.

    Dispatches to appropriate renderer based on input type.
    """
    config = build_config(rules)

    if isinstance(inp, PictureInput):
        html = render_picture(inp.path, config)
    elif isinstance(inp, HeroInput):
        html = render_hero(inp.file, inp.prompt, inp.ai, config)
    elif isinstance(inp, SlideInput):
        html = render_slide(inp.name, inp.essential, config)
    elif isinstance(inp, VideoInput):
        html = render_video(inp.path, config, build_hydration_config(rules))
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

    return FragmentOutput(html=html)
