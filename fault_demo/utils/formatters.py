"""
Formatting utilities for demo output.
"""


def fault_message(exc: BaseException) -> str:
    """
    Reduce an exception to a single-line message.

    Uses the first non-blank line of str(exc), falling back to the
    exception class name when the exception carries no text.
    """
    for line in str(exc).splitlines():
        if line.strip():
            return line.strip()
    return type(exc).__name__


def format_duration(ms: float) -> str:
    """
    Format a duration in milliseconds.

    Returns:
        "850us", "12ms" or "1.5s" depending on magnitude
    """
    ms = float(ms or 0)
    if ms < 1:
        return f"{ms * 1000:.0f}us"
    if ms < 1000:
        return f"{ms:.0f}ms"
    return f"{ms / 1000:.1f}s"


def truncate(text: str, max_length: int = 60) -> str:
    """Truncate text with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."
