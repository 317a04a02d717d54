import importlib
from typing import Literal

from fabric.utils import bulk_connect
from gi.repository import Gdk


# Function to setup cursor hover
def setup_cursor_hover(
    widget, cursor_name: Literal["pointer", "crosshair", "grab"] = "pointer"
):
    display = Gdk.Display.get_default()

    def on_enter_notify_event(widget, _):
        cursor = Gdk.Cursor.new_from_name(display, cursor_name)
        widget.get_window().set_cursor(cursor)

    def on_leave_notify_event(widget, _):
        cursor = Gdk.Cursor.new_from_name(display, "default")
        widget.get_window().set_cursor(cursor)

    bulk_connect(
        widget,
        {
            "enter-notify-event": on_enter_notify_event,
            "leave-notify-event": on_leave_notify_event,
        },
    )


# Function to import a widget class from its dotted path
def lazy_load_widget(widget_name: str, widgets_list: dict[str, str]):
    if widget_name not in widgets_list:
        raise KeyError(f"Widget {widget_name} not found in the dictionary.")

    module_name, class_name = widgets_list[widget_name].rsplit(".", 1)
    module = importlib.import_module(module_name)
    return getattr(module, class_name)
