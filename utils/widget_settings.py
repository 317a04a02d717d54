from typing import Dict, List, TypedDict

from .types import ClockFormat, Layer, Location

General = TypedDict(
    "General",
    {
        "debug": bool,
        "layer": Layer,
        "location": Location,
        "height": int,
        "margin": str,
    },
)

Layout = TypedDict(
    "Layout",
    {
        "start_container": List[str],
        "center_container": List[str],
        "end_container": List[str],
    },
)

Workspaces = TypedDict(
    "Workspaces",
    {
        "spacing": int,
        "reverse_scroll": bool,
        "default_label_format": str,
        "icon_map": Dict[str, str],
    },
)

DateTimeMenu = TypedDict(
    "DateTimeMenu",
    {
        "clock_format": ClockFormat,
        "format": str,
        "interval": int,
    },
)


class BarConfig(TypedDict):
    general: General
    layout: Layout
    workspaces: Workspaces
    date_time: DateTimeMenu
