"""
Site notices - ad-blocker nag and conference talk warning.

Both are warning boxes around a conversation aside.
"""

from __future__ import annotations

import html
from dataclasses import dataclass

from siteviews.components.conversation import render_conversation
from siteviews.components.hydration import (
    DEFAULT_HYDRATION_CONFIG,
    HydrationConfig,
    mount,
)

# --- Configuration ---


@dataclass(frozen=True)
class AdConfig:
    """Ethical ads placement."""

    client_script_src: str = "https://media.ethicalads.io/media/client/ethicalads.min.js"
    publisher: str = "christinewebsite"
    ad_type: str = "text"
    ad_style: str = "fixedfooter"
    speaker: str = "Cadey"
    mood: str = "coffee"


@dataclass(frozen=True)
class TalkConfig:
    """Conference talk warning."""

    speaker: str = "Cadey"
    mood: str = "coffee"
    hide_fluff_widget: str = "NoFunAllowed"
    message: str = (
        "So you are aware: you are reading the written version of a conference talk. "
        "This is written in a different style that is more lighthearted, conversational "
        "and different than the content normally on this blog. The words being said are "
        "the verbatim words that were spoken at the conference. The slides are the literal "
        "slides for each spoken utterance. If you want to hide the non-essential slides, "
        "please press this button:"
    )


DEFAULT_AD_CONFIG = AdConfig()
DEFAULT_TALK_CONFIG = TalkConfig()

DEFAULT_NAG_HTML = (
    "Hello! Thank you for visiting my website. You seem to be using an ad-blocker. "
    "I understand why you do this, but I'd really appreciate if it you would turn it off "
    "for my website. These ads help pay for running the website and are done by "
    '<a href="https://www.ethicalads.io/">Ethical Ads</a>. '
    "I do not receive detailed analytics on the ads and from what I understand neither "
    "does Ethical Ads. If you don't want to disable your ad blocker, please consider "
    'donating on <a href="https://www.patreon.com/cadey">Patreon</a> or sending some '
    "extra cash to <code>xeiaso.eth</code> or "
    "<code>0xeA223Ca8968Ca59e0Bc79Ba331c2F6f636A3fB82</code>. "
    "It helps fund the website's hosting bills and pay for the expensive technical editor "
    "that I use for my longer articles. Thanks and be well!"
)


# --- Renderers ---


def render_advertiser_nag(
    nag_html: str | None = None,
    config: AdConfig = DEFAULT_AD_CONFIG,
    hydration: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> str:
    """
    Render the ad container with the ad-blocker nag.

    Args:
        nag_html: Trusted HTML replacing the default aside.
        config: Ad network settings.
        hydration: Used for the aside's sticker locations.
    """
    if nag_html is None:
        nag_html = render_conversation(
            config.speaker, config.mood, DEFAULT_NAG_HTML, hydration.conversation
        )

    return (
        f'<script async src="{html.escape(config.client_script_src)}"></script>'
        '<div class="adaptive" '
        f'data-ea-publisher="{html.escape(config.publisher)}" '
        f'data-ea-type="{html.escape(config.ad_type)}" '
        f'data-ea-style="{html.escape(config.ad_style)}">'
        f'<div class="warning">{nag_html}</div>'
        "</div>"
    )


def render_talk_warning(
    config: TalkConfig = DEFAULT_TALK_CONFIG,
    hydration: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> str:
    """Render the talk warning with the button that hides non-essential slides."""
    button = mount(config.hide_fluff_widget, None, hydration)
    body = f"{html.escape(config.message)} {button}"
    aside = render_conversation(config.speaker, config.mood, body, hydration.conversation)
    return f'<div class="warning">{aside}</div>'
