"""
Notices component - ad-blocker nag and talk warning.
"""

from ._impl import (
    DEFAULT_AD_CONFIG,
    DEFAULT_NAG_HTML,
    DEFAULT_TALK_CONFIG,
    AdConfig,
    TalkConfig,
    render_advertiser_nag,
    render_talk_warning,
)
from .component import build_ad_config, build_talk_config, run
from .models import AdvertiserNagInput, TalkWarningInput
from .ports import RulesPort

__all__ = [
    "run",
    "build_ad_config",
    "build_talk_config",
    "AdvertiserNagInput",
    "TalkWarningInput",
    "RulesPort",
    "DEFAULT_AD_CONFIG",
    "DEFAULT_NAG_HTML",
    "DEFAULT_TALK_CONFIG",
    "AdConfig",
    "TalkConfig",
    "render_advertiser_nag",
    "render_talk_warning",
]
