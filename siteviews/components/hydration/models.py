"""
Hydration component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --- Errors ---


class HydrationError(Exception):
    """Base error for mount point rendering."""


class InvalidWidgetNameError(HydrationError):
    """Raised when a mount is requested without a widget name."""


class PropsSerializationError(HydrationError):
    """Raised when widget props cannot be represented as JSON."""


# --- Input Models ---


@dataclass(frozen=True)
class MountInput:
    """Request to mount a client widget."""

    widget_name: str
    props: Any = None


# --- Output Models ---


@dataclass(frozen=True)
class MountedWidget:
    """A rendered mount point."""

    mount_id: str
    widget_name: str
    module_url: str
    html: str


@dataclass(frozen=True)
class MountOutput:
    """Output of the mount entry point."""

    widget: MountedWidget
    success: bool = True

    @property
    def html(self) -> str:
        return self.widget.html
