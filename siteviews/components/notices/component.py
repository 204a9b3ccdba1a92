"""
Notices component - ad-blocker nag and talk warning.
"""

from __future__ import annotations

from siteviews.components.conversation import FragmentOutput
from siteviews.components.hydration import build_config as build_hydration_config

from ._impl import (
    AdConfig,
    TalkConfig,
    render_advertiser_nag,
    render_talk_warning,
)
from .models import AdvertiserNagInput, TalkWarningInput
from .ports import RulesPort


def build_ad_config(rules: RulesPort | None) -> AdConfig:
    """Build ad config from rules port."""
    if rules is None:
        return AdConfig()
    return AdConfig(**rules.get_ad_config())


def build_talk_config(rules: RulesPort | None) -> TalkConfig:
    """Build talk warning config from rules port."""
    if rules is None:
        return TalkConfig()
    return TalkConfig(**rules.get_talk_config())


def run(
    inp: AdvertiserNagInput | TalkWarningInput,
    *,
    rules: RulesPort | None = None,
) -> FragmentOutput:
    """Main entry point for the notices component."""
    hydration = build_hydration_config(rules)

    if isinstance(inp, AdvertiserNagInput):
        html = render_advertiser_nag(inp.nag_html, build_ad_config(rules), hydration)
    elif isinstance(inp, TalkWarningInput):
        html = render_talk_warning(build_talk_config(rules), hydration)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")

    return FragmentOutput(html=html)
