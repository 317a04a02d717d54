from fabric.widgets.datetime import DateTime

from shared import BoxWidget


def clock_formatter(date_format: str, clock_format: str) -> str:
    time_format = "%I:%M %p" if clock_format == "12h" else "%H:%M"
    return f"{date_format} {time_format}".strip()


class DateTimeWidget(BoxWidget):
    """Clock shown at the end of the bar."""

    def __init__(self, config):
        self.dt_config = config.get("date_time", {})

        super().__init__(config=self.dt_config, name="date-time")

        self.datetime = DateTime(
            name="inner-date-time",
            formatters=[
                clock_formatter(
                    self.dt_config.get("format", ""),
                    self.dt_config.get("clock_format", "12h"),
                )
            ],
            interval=self.dt_config.get("interval", 60000),
        )
        self.children = (self.datetime,)
