from typing import Literal

Layer = Literal["background", "bottom", "top", "overlay"]

Location = Literal["top", "bottom"]

ClockFormat = Literal["12h", "24h"]
