"""
Hydration component - mount client widgets into static pages.

Invariants:
- Every mount gets a fresh id; no counters or shared state
- The no-script notice is visible until the loader script clears it
- Embedded JSON cannot terminate the enclosing script element
"""

from __future__ import annotations

from siteviews.components.conversation import build_config as build_conversation_config

from ._impl import HydrationConfig, create_mount
from .models import MountInput, MountOutput
from .ports import RulesPort


def build_config(rules: RulesPort | None) -> HydrationConfig:
    """Build hydration config from rules port."""
    if rules is None:
        return HydrationConfig()

    speaker, mood, message = rules.get_noscript_notice()
    return HydrationConfig(
        widget_base_path=rules.get_widget_base_path(),
        widget_extension=rules.get_widget_extension(),
        cache_buster_param=rules.get_cache_buster_param(),
        noscript_speaker=speaker,
        noscript_mood=mood,
        noscript_message=message,
        conversation=build_conversation_config(rules),
    )


# --- Component Entry Points ---


def run_mount(
    inp: MountInput,
    *,
    rules: RulesPort | None = None,
) -> MountOutput:
    """
    Mount a client widget.

    Raises:
        InvalidWidgetNameError: widget name is empty.
        PropsSerializationError: props are not JSON serializable.
    """
    widget = create_mount(inp.widget_name, inp.props, build_config(rules))
    return MountOutput(widget=widget)


def run(
    inp: MountInput,
    *,
    rules: RulesPort | None = None,
) -> MountOutput:
    """Main entry point for the hydration component."""
    if isinstance(inp, MountInput):
        return run_mount(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
