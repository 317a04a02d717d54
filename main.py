import time
import setproctitle
from fabric import Application
from fabric.utils import cooldown, exec_shell_command, get_relative_path, monitor_file
from loguru import logger

import utils.functions as helpers
from utils.config import widget_config
from utils.constants import APPLICATION_NAME

DEBUG = widget_config.get("general", {}).get("debug", False)
_start_time = time.perf_counter() if DEBUG else None


def time_module_load(name: str, func):
    if not DEBUG:
        return func()
    start = time.perf_counter()
    result = func()
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(f"[Timing] Module '{name}' loaded in {elapsed_ms:.1f} ms")
    return result


def compile_scss():
    helpers.check_executable_exists("sass")

    logger.info("[Main] Compiling SCSS")
    start = time.perf_counter() if DEBUG else None

    output = exec_shell_command("sass styles/main.scss dist/main.css --no-source-map")

    if DEBUG:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(f"[Timing] SCSS compiled in {elapsed_ms:.1f} ms")

    if output:
        logger.error("[Main] Failed to compile SCSS!")


@cooldown(2)
@helpers.run_in_thread
def process_and_apply_css(app: Application):
    compile_scss()
    app.set_stylesheet_from_file(get_relative_path("dist/main.css"))
    logger.info("[Main] CSS applied")


if __name__ == "__main__":
    compile_scss()

    from modules.bar import StatusBar

    bar = time_module_load("StatusBar", lambda: StatusBar(widget_config))

    app = Application(APPLICATION_NAME, windows=[bar])
    app.set_stylesheet_from_file(get_relative_path("dist/main.css"))

    # File watcher for live reload
    style_monitor = monitor_file(get_relative_path("./styles"))
    style_monitor.connect("changed", lambda *args: process_and_apply_css(app))

    if DEBUG and _start_time:
        total_ms = (time.perf_counter() - _start_time) * 1000
        logger.info(f"[Timing] Total startup completed in {total_ms:.1f} ms")

    setproctitle.setproctitle(APPLICATION_NAME)
    app.run()
