"""Assemble configured widgets into one status line."""

import logging

from ccstatusline.types.render import RenderContext, WidgetItem
from ccstatusline.utils.colors import colorize
from ccstatusline.widgets.registry import get_widget

logger = logging.getLogger(__name__)


def render_status_line(
    items: list[WidgetItem],
    context: RenderContext,
    separator: str = " | ",
    use_colors: bool = True,
) -> str:
    """Render each item and join the non-empty parts with the separator.

    Unknown widget types and widgets without data are left out.
    """
    parts: list[str] = []
    for item in items:
        widget = get_widget(item.type)
        if widget is None:
            logger.debug("Unknown widget type: %s", item.type)
            continue

        text = widget.render(item, context)
        if not text:
            continue

        if use_colors:
            text = colorize(text, widget.color_for(item))
        parts.append(text)

    return separator.join(parts)
