"""
Conversation component - character asides and stickers.

Invariants:
- Names and moods are escaped; the body is trusted HTML
- Sticker paths use the lowercased character name
"""

from __future__ import annotations

from ._impl import (
    ConversationConfig,
    render_conversation,
    render_sticker,
)
from .models import ConversationInput, FragmentOutput, StickerInput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> ConversationConfig:
    """Build conversation config from rules port."""
    if rules is None:
        return ConversationConfig()

    return ConversationConfig(
        static_base_url=rules.get_static_base_url(),
        stickers_dir=rules.get_stickers_dir(),
        characters_path=rules.get_characters_path(),
        sticker_max_height=rules.get_sticker_max_height(),
    )


# --- Component Entry Points ---


def run_conversation(
    inp: ConversationInput,
    *,
    rules: RulesPort | None = None,
) -> FragmentOutput:
    """Render a character aside."""
    html = render_conversation(inp.name, inp.mood, inp.body_html, build_config(rules))
    return FragmentOutput(html=html)


def run_sticker(
    inp: StickerInput,
    *,
    rules: RulesPort | None = None,
) -> FragmentOutput:
    """Render a standalone sticker."""
    return FragmentOutput(html=render_sticker(inp.name, inp.mood, build_config(rules)))


def run(
    inp: ConversationInput | StickerInput,
    *,
    rules: RulesPort | None = None,
) -> FragmentOutput:
    """
    Main entry point for the conversation component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ConversationInput):
        return run_conversation(inp, rules=rules)
    elif isinstance(inp, StickerInput):
        return run_sticker(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
