"""Widgets for the ccstatusline status line."""

from ccstatusline.widgets.simple_widget import SimpleWidget
from ccstatusline.widgets.registry import WIDGET_REGISTRY, get_widget, is_known_widget_type
from ccstatusline.widgets.renderer import render_status_line

__all__ = [
    "SimpleWidget",
    "WIDGET_REGISTRY",
    "get_widget",
    "is_known_widget_type",
    "render_status_line",
]
