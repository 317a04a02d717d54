APPLICATION_NAME = "Wayspace"

DEFAULT_CONFIG = {
    "general": {
        "debug": False,
        "layer": "top",
        "location": "top",
        "height": 40,
        "margin": "4px 4px 0px 0px",
    },
    "layout": {
        "start_container": [],
        "center_container": ["workspaces"],
        "end_container": ["date_time"],
    },
    "workspaces": {
        "spacing": 10,
        "reverse_scroll": False,
        "default_label_format": "{id}",
        "icon_map": {},  # Example: {"1": "🌐", "2": "🎨"}
    },
    "date_time": {
        "clock_format": "12h",
        "format": "",
        "interval": 60000,
    },
}
