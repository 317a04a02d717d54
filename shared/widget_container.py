from fabric.widgets.box import Box
from fabric.widgets.button import Button
from fabric.widgets.eventbox import EventBox
from fabric.widgets.widget import Widget

from utils.widget_utils import setup_cursor_hover


class ToggleableWidget(Widget):
    """A widget that can be toggled on and off."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

    def toggle(self):
        """Toggle the visibility of the widget."""
        if self.is_visible():
            self.hide()
        else:
            self.show()


class BoxWidget(Box, ToggleableWidget):
    """A container for box widgets."""

    def __init__(self, spacing=None, style_classes=None, config=None, **kwargs):
        all_styles = ["panel-box"]
        if style_classes:
            if isinstance(style_classes, str):
                all_styles.append(style_classes)
            else:
                all_styles.extend(style_classes)

        super().__init__(
            spacing=4 if spacing is None else spacing,
            style_classes=all_styles,
            **kwargs,
        )

        self.config = config or {}


class EventBoxWidget(EventBox, ToggleableWidget):
    """An event box wrapping a panel box, for widgets reacting to pointer input."""

    def __init__(self, config=None, spacing=4, **kwargs):
        super().__init__(
            style_classes="panel-eventbox",
            **kwargs,
        )

        self.config = config or {}

        self.box = Box(style_classes="panel-box", spacing=spacing)
        self.add(self.box)


class HoverButton(Button):
    """A button that shows a pointer cursor on hover."""

    def __init__(self, **kwargs):
        super().__init__(
            **kwargs,
        )

        setup_cursor_hover(self)
