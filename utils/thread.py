import threading
from functools import wraps


def run_in_thread(func):
    """Run the decorated function in a daemon thread and return the thread."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        thread = threading.Thread(
            target=func, args=args, kwargs=kwargs, daemon=True, name=func.__name__
        )
        thread.start()
        return thread

    return wrapper
