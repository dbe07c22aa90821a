"""Plugin method registry and public exports."""

from typing import Callable, Dict

QUARTILE_METHODS: Dict[str, Callable] = {}
WHISKER_METHODS: Dict[str, Callable] = {}
SORT_METHODS: Dict[str, Callable] = {}


def register_quartile_method(*names: str):
    """Return a decorator that registers a quartile method under each name."""

    def decorator(func):
        """Register the quartile function in QUARTILE_METHODS."""
        for name in names:
            QUARTILE_METHODS[name] = func
        return func

    return decorator


def register_whisker_method(name: str):
    """Return a decorator that registers a whisker fence policy."""

    def decorator(func):
        """Register the whisker function in WHISKER_METHODS."""
        WHISKER_METHODS[name] = func
        return func

    return decorator


def register_sort_method(name: str):
    """Return a decorator that registers a group sort policy."""

    def decorator(func):
        """Register the sort function in SORT_METHODS."""
        SORT_METHODS[name] = func
        return func

    return decorator


# Import modules so decorators are executed and registries are populated.
from . import quartiles as _quartiles  # noqa: E402,F401
from . import whiskers as _whiskers  # noqa: E402,F401
from . import sorting as _sorting  # noqa: E402,F401

from .quartiles import calculate_percentile, percentile_quartiles  # noqa: E402

__all__ = [
    "QUARTILE_METHODS",
    "WHISKER_METHODS",
    "SORT_METHODS",
    "register_quartile_method",
    "register_whisker_method",
    "register_sort_method",
    "calculate_percentile",
    "percentile_quartiles",
]
