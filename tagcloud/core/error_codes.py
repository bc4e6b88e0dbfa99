# tagcloud/core/error_codes.py
"""
Structured error codes and exceptions for cloud layout.
Exceptions carry an error key; map keys to user-facing messages in the CLI.
"""

from __future__ import annotations

# Known error keys
INVALID_SIZE = "invalid_size"
SPIRAL_EXHAUSTED = "spiral_exhausted"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    INVALID_SIZE: "Rectangle size must have non-negative width and height.",
    SPIRAL_EXHAUSTED: "No free position found on the spiral. This is a bug; please report the sizes used.",
    RUN_FAILED: "Run failed. Check sizes and options.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class LayoutError(Exception):
    """Base class for layout failures."""
    error_key: str = RUN_FAILED


class InvalidSizeError(LayoutError, ValueError):
    """Requested size has a negative width or height."""
    error_key = INVALID_SIZE


class LayoutInvariantError(LayoutError, RuntimeError):
    """Spiral search exceeded its safety cap without finding a free slot."""
    error_key = SPIRAL_EXHAUSTED
