"""Lazy enumeration of all contiguous windows of a sequence."""

from importlib import metadata

from .config import GradientConfig, load_gradient_config, merge_overrides
from .gradient import WindowGradient, expected_window_count, gradient, window_bounds
from .logging_utils import configure_logging, log_event
from .reporting import export_windows, gradient_frame, summarize_passes, write_frame
from .views import WindowView

try:
    __version__ = metadata.version("gradient-slice")
except metadata.PackageNotFoundError:  # pragma: no cover - fallback for source checkouts
    __version__ = "0.3.0"

__all__ = [
    "WindowGradient",
    "WindowView",
    "gradient",
    "expected_window_count",
    "window_bounds",
    "GradientConfig",
    "load_gradient_config",
    "merge_overrides",
    "gradient_frame",
    "summarize_passes",
    "export_windows",
    "write_frame",
    "configure_logging",
    "log_event",
    "__version__",
]
