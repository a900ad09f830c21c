"""Settings that control how strictly component structure is parsed."""

from collections.abc import Generator
import contextlib
import contextvars

DEFAULT_MAX_NESTING_DEPTH = 8

_max_nesting_depth = contextvars.ContextVar(
    "max_nesting_depth", default=DEFAULT_MAX_NESTING_DEPTH
)
_relaxed_end = contextvars.ContextVar("relaxed_end", default=False)


@contextlib.contextmanager
def max_nesting_depth(limit: int) -> Generator[None, None, None]:
    """Context manager to change how deeply components may be nested.

    The root component counts as depth 1.
    """
    if limit < 1:
        raise ValueError(f"Nesting depth limit must be at least 1, got {limit}")
    token = _max_nesting_depth.set(limit)
    try:
        yield
    finally:
        _max_nesting_depth.reset(token)


def get_max_nesting_depth() -> int:
    """Return the maximum nesting depth for parsed components."""
    return _max_nesting_depth.get()


@contextlib.contextmanager
def enable_relaxed_end() -> Generator[None, None, None]:
    """Context manager to accept END lines that don't match their BEGIN."""
    token = _relaxed_end.set(True)
    try:
        yield
    finally:
        _relaxed_end.reset(token)


def is_relaxed_end_enabled() -> bool:
    """Check if mismatched END lines are accepted."""
    return _relaxed_end.get()
