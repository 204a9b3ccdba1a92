from datetime import datetime, timezone
from pathlib import Path

import pytest

from siteviews.adapters.rules_adapter import SiteRulesAdapter
from siteviews.core.entities import Attachment, Author, Post
from siteviews.rules.loader import load_rules
from siteviews.rules.models import SiteRules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def site_rules() -> SiteRules:
    """The real rules file from the project root."""
    return load_rules(PROJECT_ROOT / "rules.yaml")


@pytest.fixture
def rules_adapter(site_rules: SiteRules) -> SiteRulesAdapter:
    return SiteRulesAdapter(site_rules)


@pytest.fixture
def cadey() -> Author:
    """The trusted identity."""
    return Author(
        id="https://pony.social/users/cadey",
        name="Cadey :verified:",
        handle="cadey",
        url="https://pony.social/@cadey",
        avatar_url="https://pony.social/avatars/cadey.png",
    )


@pytest.fixture
def stranger() -> Author:
    return Author(
        id="https://example.social/users/mara",
        name="Mara :verified:",
        handle="mara",
        url="https://example.social/@mara",
        avatar_url="https://example.social/avatars/mara.png",
    )


@pytest.fixture
def post() -> Post:
    return Post(
        id="123",
        body_html="<p>hi</p>",
        published=datetime(2023, 3, 14, 9, 26, tzinfo=timezone.utc),
    )


@pytest.fixture
def png() -> Attachment:
    return Attachment(
        media_type="image/png",
        url="https://files.pony.social/media/sunset.png",
        description="a sunset",
    )


@pytest.fixture
def mp4() -> Attachment:
    return Attachment(media_type="video/mp4", url="https://files.pony.social/media/clip.mp4")


@pytest.fixture
def pdf() -> Attachment:
    return Attachment(media_type="application/pdf", url="https://files.pony.social/media/doc.pdf")
