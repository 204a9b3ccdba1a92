"""
Conversation component - character asides and stickers.
"""

from ._impl import (
    DEFAULT_CONVERSATION_CONFIG,
    ConversationConfig,
    render_conversation,
    render_sticker,
    sticker_base,
)
from .component import (
    build_config,
    run,
    run_conversation,
    run_sticker,
)
from .models import ConversationInput, FragmentOutput, StickerInput
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_conversation",
    "run_sticker",
    "build_config",
    # Models
    "ConversationInput",
    "StickerInput",
    "FragmentOutput",
    # Ports
    "RulesPort",
    # Rendering
    "DEFAULT_CONVERSATION_CONFIG",
    "ConversationConfig",
    "render_conversation",
    "render_sticker",
    "sticker_base",
]
