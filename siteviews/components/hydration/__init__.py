"""
Hydration component - mount client widgets into static pages.
"""

from ._impl import (
    DEFAULT_HYDRATION_CONFIG,
    HydrationConfig,
    create_mount,
    mount,
    new_mount_id,
    script_json,
    widget_module_url,
)
from .component import build_config, run, run_mount
from .models import (
    HydrationError,
    InvalidWidgetNameError,
    MountedWidget,
    MountInput,
    MountOutput,
    PropsSerializationError,
)
from .ports import RulesPort

__all__ = [
    # Entry points
    "run",
    "run_mount",
    "build_config",
    # Models
    "MountInput",
    "MountOutput",
    "MountedWidget",
    # Errors
    "HydrationError",
    "InvalidWidgetNameError",
    "PropsSerializationError",
    # Ports
    "RulesPort",
    # Rendering
    "DEFAULT_HYDRATION_CONFIG",
    "HydrationConfig",
    "create_mount",
    "mount",
    "new_mount_id",
    "script_json",
    "widget_module_url",
]
