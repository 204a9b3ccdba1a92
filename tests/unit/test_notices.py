"""
Tests for the ad-blocker nag and talk warning.
"""

from __future__ import annotations

import pytest

from siteviews.components.notices import (
    AdConfig,
    AdvertiserNagInput,
    TalkWarningInput,
    render_advertiser_nag,
    render_talk_warning,
    run,
)


class TestAdvertiserNag:
    """Ad container with nag."""

    def test_loader_script(self) -> None:
        html = render_advertiser_nag()
        assert html.startswith(
            '<script async src="https://media.ethicalads.io/media/client/ethicalads.min.js">'
            "</script>"
        )

    def test_container_attributes(self) -> None:
        html = render_advertiser_nag()
        assert (
            '<div class="adaptive" data-ea-publisher="christinewebsite" '
            'data-ea-type="text" data-ea-style="fixedfooter">'
        ) in html

    def test_default_nag(self) -> None:
        html = render_advertiser_nag()
        assert '<div class="warning"><div class="conversation">' in html
        assert "<b>Cadey</b>" in html
        assert '<a href="https://www.patreon.com/cadey">Patreon</a>' in html
        assert "<code>xeiaso.eth</code>" in html

    def test_custom_nag(self) -> None:
        html = render_advertiser_nag("<p>please</p>")
        assert '<div class="warning"><p>please</p></div>' in html
        assert "conversation" not in html

    def test_custom_publisher(self) -> None:
        html = render_advertiser_nag(config=AdConfig(publisher="someone"))
        assert 'data-ea-publisher="someone"' in html


class TestTalkWarning:
    """Talk warning mounts the slide toggle."""

    def test_warning_box(self) -> None:
        html = render_talk_warning()
        assert html.startswith('<div class="warning"><div class="conversation">')
        assert "written version of a conference talk" in html

    def test_mounts_no_fun_allowed(self) -> None:
        html = render_talk_warning()
        assert "/static/xeact/NoFunAllowed.js?cacheBuster=" in html
        assert "const props = null;" in html
        assert "please press this button: <div id=" in html


class TestNoticesComponent:
    """Dispatching entry point."""

    def test_run_nag_with_rules(self, rules_adapter) -> None:
        html = run(AdvertiserNagInput(), rules=rules_adapter).html
        assert 'data-ea-publisher="christinewebsite"' in html

    def test_run_talk_with_rules(self, rules_adapter) -> None:
        html = run(TalkWarningInput(), rules=rules_adapter).html
        assert "NoFunAllowed.js" in html
        assert "please press this button: <div id=" in html

    def test_run_unknown_input(self) -> None:
        with pytest.raises(ValueError, match="Unknown input type"):
            run(None)  # type: ignore[arg-type]
