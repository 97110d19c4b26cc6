"""Data-driven widget: label, color and a value extractor over the render context."""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ccstatusline.types.render import RenderContext, WidgetItem
from ccstatusline.utils.context_percentage import display_percentage
from ccstatusline.utils.formatting import format_tokens


@dataclass(frozen=True)
class SimpleWidget:
    name: str
    description: str
    label: str
    preview_value: str
    default_color: str
    get_value: Callable[[RenderContext], Any]
    formatter: Callable[[Any], str] = format_tokens
    # Percentage widgets can show the remaining share instead
    supports_inverse: bool = False

    def render(self, item: WidgetItem, context: RenderContext) -> Optional[str]:
        if context.is_preview:
            return self._labelled(item, self.preview_value)

        value = self.get_value(context)
        if value is None:
            return None

        if self.supports_inverse and item.inverse:
            value = display_percentage(value, inverse=True)

        return self._labelled(item, self.formatter(value))

    def color_for(self, item: WidgetItem) -> str:
        return item.color or self.default_color

    def _labelled(self, item: WidgetItem, text: str) -> str:
        return text if item.raw_value else f"{self.label}{text}"
