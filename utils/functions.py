import shutil
import time
from functools import lru_cache
from typing import Dict, List

from .exceptions import ExecutableNotFoundError
from .thread import run_in_thread  # noqa: F401


def ttl_lru_cache(seconds_to_live: int, maxsize: int = 128):
    def wrapper(func):
        @lru_cache(maxsize)
        def inner(__ttl, *args, **kwargs):
            return func(*args, **kwargs)
        return lambda *args, **kwargs: inner(time.time() // seconds_to_live, *args, **kwargs)
    return wrapper

# Function to exclude keys from a dictionary
def exclude_keys(d: Dict, keys_to_exclude: List[str]) -> Dict:
    return {k: v for k, v in d.items() if k not in keys_to_exclude}

# Merge the parsed data with the default configuration
def merge_defaults(data, defaults):
    if isinstance(defaults, dict) and isinstance(data, dict):
        return {**defaults, **data}
    elif isinstance(defaults, list) and isinstance(data, list):
        return data if data else defaults
    else:
        return data if data is not None else defaults

# Validate the widgets
def validate_widgets(parsed_data, default_config):
    """Validates the widgets defined in the layout configuration.

    Args:
        parsed_data (dict): The parsed configuration data
        default_config (dict): The default configuration data

    Raises:
        ValueError: If an unknown widget is found in the layout
    """
    layout = parsed_data.get("layout", {})

    for section in layout:
        for widget in layout[section]:
            if widget not in default_config:
                raise ValueError(
                    f"Invalid widget '{widget}' found in section {section}. Please check the widget name."
                )

# Function to check if an executable exists
@ttl_lru_cache(600, 10)
def executable_exists(executable_name):
    executable_path = shutil.which(executable_name)
    return bool(executable_path)

def check_executable_exists(executable_name):
    if not executable_exists(executable_name):
        raise ExecutableNotFoundError(executable_name)
