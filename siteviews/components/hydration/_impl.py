"""
Hydration bridge - mount client widgets into server-rendered pages.

Each mount emits a container element holding a no-script notice and a
module script that imports the widget, clears the container and appends
whatever node the widget's default export returns.

Key behaviors:
- Mount ids are uuid4 hex strings, fresh on every call
- The id doubles as a cache buster on the widget module URL
- Everything interpolated into the script is JSON encoded with <, >, &,
  U+2028 and U+2029 escaped, so no value can close the script element
- Props that are not representable as JSON fail the build
"""

from __future__ import annotations

import html
import json
import logging
import uuid
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote, urlencode

from siteviews.components.conversation import (
    DEFAULT_CONVERSATION_CONFIG,
    ConversationConfig,
    render_conversation,
)

from .models import InvalidWidgetNameError, MountedWidget, PropsSerializationError

logger = logging.getLogger(__name__)

# --- Configuration ---


@dataclass(frozen=True)
class HydrationConfig:
    """Widget module location and no-script notice."""

    widget_base_path: str = "/static/xeact/"
    widget_extension: str = "js"
    cache_buster_param: str = "cacheBuster"

    noscript_speaker: str = "Aoi"
    noscript_mood: str = "coffee"
    noscript_message: str = "This dynamic component requires JavaScript to function, sorry!"

    conversation: ConversationConfig = DEFAULT_CONVERSATION_CONFIG


DEFAULT_HYDRATION_CONFIG = HydrationConfig()


# --- Script-safe JSON ---

_SCRIPT_ESCAPES = {
    ord("<"): "\\u003c",
    ord(">"): "\\u003e",
    ord("&"): "\\u0026",
    ord("\u2028"): "\\u2028",
    ord("\u2029"): "\\u2029",
}


def _check_keys(value: Any, active: set[int]) -> None:
    """Reject dict keys json.dumps would silently coerce to strings."""
    if not isinstance(value, (dict, list, tuple)) or id(value) in active:
        # Cycles are reported by json.dumps itself.
        return

    active.add(id(value))
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise PropsSerializationError(
                    f"Widget props keys must be strings, got {type(key).__name__}: {key!r}"
                )
            _check_keys(item, active)
    else:
        for item in value:
            _check_keys(item, active)
    active.discard(id(value))


def script_json(value: Any) -> str:
    """
    Encode a value as JSON that is safe to embed inside <script>.

    The escapes only touch characters inside JSON strings, so json.loads of
    the result is equal to the input.

    Raises:
        PropsSerializationError: value is not representable as JSON
            or has a non-string dict key.
    """
    _check_keys(value, set())
    try:
        encoded = json.dumps(value, allow_nan=False, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise PropsSerializationError(f"Widget props are not JSON serializable: {e}") from e

    return encoded.translate(_SCRIPT_ESCAPES)


# --- Mount ---


def new_mount_id() -> str:
    """128-bit random mount id, hex encoded without hyphens."""
    return uuid.uuid4().hex


def widget_module_url(
    widget_name: str,
    mount_id: str,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> str:
    """URL of a widget module with the per-mount cache buster."""
    name = quote(widget_name, safe="")
    path = f"{config.widget_base_path}{name}.{config.widget_extension}"
    return f"{path}?{urlencode({config.cache_buster_param: mount_id})}"


def _loader_script(module_url: str, mount_id: str, props_json: str) -> str:
    return f"""
<script type="module">
import Component from {script_json(module_url)};

const g = (name) => document.getElementById(name);
const x = (elem) => {{
    while (elem.lastChild) {{
        elem.removeChild(elem.lastChild);
    }}
}};

const props = {props_json};
const root = g({script_json(mount_id)});
x(root);

root.appendChild(Component(props));
</script>
"""


def create_mount(
    widget_name: str,
    props: Any = None,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> MountedWidget:
    """
    Render a mount point for a client widget.

    Args:
        widget_name: Client module name, resolved under the widget base path.
        props: JSON-serializable value passed to the widget's default export.
        config: Widget location and no-script notice.

    Returns:
        MountedWidget with the fresh mount id and the HTML fragment.

    Raises:
        InvalidWidgetNameError: widget_name is empty.
        PropsSerializationError: props are not representable as JSON.
    """
    if not widget_name or not widget_name.strip():
        raise InvalidWidgetNameError("Widget name is required")

    # Props are checked before an id is allocated
    props_json = script_json(props)

    mount_id = new_mount_id()
    module_url = widget_module_url(widget_name, mount_id, config)

    notice = render_conversation(
        config.noscript_speaker,
        config.noscript_mood,
        html.escape(config.noscript_message),
        config.conversation,
    )
    container = (
        f'<div id="{mount_id}">'
        f'<noscript><div class="warning">{notice}</div></noscript>'
        "</div>"
    )

    logger.debug("Mounted widget %s at %s", widget_name, mount_id)

    return MountedWidget(
        mount_id=mount_id,
        widget_name=widget_name,
        module_url=module_url,
        html=container + _loader_script(module_url, mount_id, props_json),
    )


def mount(
    widget_name: str,
    props: Any = None,
    config: HydrationConfig = DEFAULT_HYDRATION_CONFIG,
) -> str:
    """Render a mount point and return only the HTML fragment."""
    return create_mount(widget_name, props, config).html
