import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from siteviews.adapters.rules_adapter import SiteRulesAdapter


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            os.environ.get("SITEVIEWS_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules(settings: Settings = Depends(get_settings)) -> SiteRulesAdapter:
    return SiteRulesAdapter.from_path(settings.rules_path)
