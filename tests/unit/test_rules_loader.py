"""
Rules loader and adapter tests.

Loading fails fast on missing files, bad YAML and schema violations.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import yaml

from siteviews.adapters.rules_adapter import SiteRulesAdapter
from siteviews.components.hydration import build_config as build_hydration_config
from siteviews.components.notices import build_ad_config, build_talk_config
from siteviews.components.post_embed import DEFAULT_POST_EMBED_CONFIG
from siteviews.components.post_embed import build_config as build_post_config
from siteviews.rules.loader import load_rules
from siteviews.rules.models import SiteRules

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadRules:
    """Loading rules.yaml."""

    def test_load_actual_rules_file(self) -> None:
        rules = load_rules(PROJECT_ROOT / "rules.yaml")
        assert isinstance(rules, SiteRules)
        assert rules.project.slug == "siteviews"
        assert rules.hydration.widget_base_path == "/static/xeact/"
        assert rules.posts.trusted_identity == "https://pony.social/users/cadey"

    def test_required_sections_declared(self, site_rules: SiteRules) -> None:
        for section in site_rules.project.required_sections:
            assert section in SiteRules.model_fields

    def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_invalid_yaml(self) -> None:
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("invalid: yaml: content: [")
            f.flush()

            with pytest.raises(ValueError, match="Invalid YAML"):
                load_rules(Path(f.name))

    def test_schema_violation(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "project:\n  slug: x\n")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_empty_widget_base_path_rejected(self, tmp_path: Path) -> None:
        data = yaml.safe_load((PROJECT_ROOT / "rules.yaml").read_text(encoding="utf-8"))
        data["hydration"]["widget_base_path"] = ""
        path = _write(tmp_path, yaml.safe_dump(data))
        with pytest.raises(ValueError, match="widget_base_path"):
            load_rules(path)

    def test_required_sections_must_cover_schema(self, tmp_path: Path) -> None:
        data = yaml.safe_load((PROJECT_ROOT / "rules.yaml").read_text(encoding="utf-8"))
        data["project"]["required_sections"].remove("talks")
        path = _write(tmp_path, yaml.safe_dump(data))
        with pytest.raises(ValueError, match=r"required_sections missing expected: \['talks'\]"):
            load_rules(path)

    def test_fenced_yaml_block(self, tmp_path: Path) -> None:
        body = (PROJECT_ROOT / "rules.yaml").read_text(encoding="utf-8")
        path = _write(tmp_path, f"# Site rules\n\nSome prose.\n\n```yaml\n{body}\n```\n")
        assert load_rules(path).project.slug == "siteviews"


class TestSiteRulesAdapter:
    """Adapter feeds component configs."""

    def test_from_path(self) -> None:
        adapter = SiteRulesAdapter.from_path(PROJECT_ROOT / "rules.yaml")
        assert adapter.get_widget_extension() == "js"

    def test_shipped_rules_match_defaults(self, rules_adapter: SiteRulesAdapter) -> None:
        assert build_post_config(rules_adapter) == DEFAULT_POST_EMBED_CONFIG
        assert build_hydration_config(rules_adapter) == build_hydration_config(None)
        assert build_ad_config(rules_adapter) == build_ad_config(None)
        assert build_talk_config(rules_adapter) == build_talk_config(None)

    def test_noscript_notice(self, rules_adapter: SiteRulesAdapter) -> None:
        speaker, mood, message = rules_adapter.get_noscript_notice()
        assert (speaker, mood) == ("Aoi", "coffee")
        assert "requires JavaScript" in message

    def test_overridden_rules_flow_through(self, site_rules: SiteRules) -> None:
        custom = site_rules.model_copy(deep=True)
        custom.hydration.widget_base_path = "/widgets/"
        custom.posts.trusted_identity = "https://example.social/users/mara"

        adapter = SiteRulesAdapter(custom)
        assert build_hydration_config(adapter).widget_base_path == "/widgets/"
        assert build_post_config(adapter).trusted_identity == "https://example.social/users/mara"
