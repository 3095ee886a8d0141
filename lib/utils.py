# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application:
# - utc_now(): timezone-aware "now" used for timestamps
# - format_duration(): human-readable elapsed time for the health endpoint
# =============================================================================

from datetime import datetime, timezone


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now() -> datetime:
    """
    Get the current time as a timezone-aware UTC datetime.

    Always use this instead of datetime.utcnow(), which returns a naive
    datetime and is deprecated.
    """
    return datetime.now(timezone.utc)


def format_duration(seconds: float) -> str:
    """
    Format an elapsed time the way Go prints a time.Duration.

    Sub-second values are shown in milliseconds, longer values as
    hours/minutes/seconds with up to three decimal places on the seconds.

    Args:
        seconds: Elapsed time in seconds (must be >= 0)

    Returns:
        Duration string

    Raises:
        ValueError: If seconds is negative

    Example:
        format_duration(0)         # "0s"
        format_duration(0.25)      # "250ms"
        format_duration(65.5)      # "1m5.5s"
        format_duration(3725.125)  # "1h2m5.125s"
    """
    if seconds < 0:
        raise ValueError(f"Duration cannot be negative: {seconds}")

    total_ms = int(round(seconds * 1000))
    if total_ms == 0:
        return "0s"
    if total_ms < 1000:
        return f"{total_ms}ms"

    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)

    secs_text = str(secs)
    if millis:
        secs_text = f"{secs}.{millis:03d}".rstrip("0")

    if hours:
        return f"{hours}h{minutes}m{secs_text}s"
    if minutes:
        return f"{minutes}m{secs_text}s"
    return f"{secs_text}s"
