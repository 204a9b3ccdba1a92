import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from siteviews.rules.models import SiteRules

logger = logging.getLogger(__name__)


def _strip_fences(content: str) -> str:
    """Return the first ```yaml block of a document, or the document itself."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path) -> SiteRules:
    """
    Load and validate the site rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = SiteRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    expected_sections = set(SiteRules.model_fields) - {"project"}
    missing_declared = expected_sections - set(rules.project.required_sections)
    if missing_declared:
        raise ValueError(f"required_sections missing expected: {sorted(missing_declared)}")

    logger.info("Loaded site rules %s (version %s)", rules.project.slug, rules.project.rules_version)
    return rules
