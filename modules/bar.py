import time

from fabric.widgets.box import Box
from fabric.widgets.centerbox import CenterBox
from fabric.widgets.wayland import WaylandWindow as Window
from loguru import logger

from shared import ToggleableWidget
from utils.widget_utils import lazy_load_widget


class StatusBar(Window, ToggleableWidget):
    """A widget to display the status bar panel."""

    def __init__(self, config, **kwargs):
        self.widgets_list = {
            "workspaces": "widgets.workspaces.WorkspacesWidget",
            "date_time": "widgets.datetime_menu.DateTimeWidget",
        }

        self.debug = config.get("general", {}).get("debug", False)
        options = config["general"]

        self.bar_location = options.get("location", "top")
        location_class = f"location-{self.bar_location}"

        layout = self.make_layout(config)

        self.box = CenterBox(
            name="panel-inner",
            start_children=Box(
                name="start",
                spacing=4,
                orientation="h",
                children=layout["left_section"],
            ),
            center_children=Box(
                name="center",
                spacing=4,
                orientation="h",
                children=layout["middle_section"],
            ),
            end_children=Box(
                name="end",
                spacing=4,
                orientation="h",
                children=layout["right_section"],
            ),
        )
        self.box.add_style_class(location_class)

        super().__init__(
            name="panel",
            layer=options["layer"],
            anchor=f"left {self.bar_location} right",
            margin=options.get("margin", "4px 4px 0px 0px"),
            keyboard_mode="none",
            pass_through=False,
            exclusivity="auto",
            visible=options.get("visible", True),
            all_visible=False,
            child=self.box,
            **kwargs,
        )

        self.set_size_request(-1, options.get("height", 40))
        self.add_style_class(location_class)

    def make_layout(self, widget_config):
        layout = {
            "left_section": widget_config.get("layout", {}).get("start_container", []),
            "middle_section": widget_config.get("layout", {}).get(
                "center_container", []
            ),
            "right_section": widget_config.get("layout", {}).get("end_container", []),
        }

        new_layout = {"left_section": [], "middle_section": [], "right_section": []}

        for section, widget_names in layout.items():
            for widget_name in widget_names:
                cls = lazy_load_widget(widget_name, self.widgets_list)
                if self.debug:
                    start = time.perf_counter()
                    widget_instance = cls(widget_config)
                    elapsed_ms = (time.perf_counter() - start) * 1000
                    logger.info(
                        f"[Timing] Widget '{widget_name}' loaded in {elapsed_ms:.1f} ms"
                    )
                else:
                    widget_instance = cls(widget_config)
                new_layout[section].append(widget_instance)

        return new_layout
