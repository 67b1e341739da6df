"""
Clock source and duration formatting for the Line Change Timer.

All timestamps handed to the timing core are monotonic milliseconds. Only the
difference between two readings is meaningful, so saved games never keep a
raw timestamp across process restarts.
"""
import time
from typing import Optional, Protocol, runtime_checkable

from .constants import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND


@runtime_checkable
class Clock(Protocol):
    """Anything that can report the current time in milliseconds."""

    def now(self) -> float:
        """Return a monotonically non-decreasing reading in milliseconds."""
        ...


class SystemClock:
    """Production clock wrapping ``time.monotonic()``."""

    def now(self) -> float:
        return time.monotonic() * MS_PER_SECOND


def now_ms() -> float:
    """
    Get the current monotonic time in milliseconds.

    Returns:
        Milliseconds from an arbitrary process-local epoch
    """
    return time.monotonic() * MS_PER_SECOND


def fmt_duration(milliseconds: Optional[float], ceiling_ms: Optional[float] = None) -> str:
    """
    Format a duration as MM:SS, or HH:MM:SS once it reaches an hour.

    Args:
        milliseconds: Duration to format; None or negative values show as zero
        ceiling_ms: Optional display ceiling, values above it are clamped

    Returns:
        Formatted time string

    Example:
        >>> fmt_duration(90_500)
        '01:30'
        >>> fmt_duration(3_661_000)
        '01:01:01'
    """
    if milliseconds is None or milliseconds < 0:
        milliseconds = 0
    if ceiling_ms is not None:
        milliseconds = min(milliseconds, ceiling_ms)

    total_seconds = int(milliseconds // MS_PER_SECOND)
    hours = total_seconds // (MS_PER_HOUR // MS_PER_SECOND)
    minutes = (total_seconds % (MS_PER_HOUR // MS_PER_SECOND)) // (MS_PER_MINUTE // MS_PER_SECOND)
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def minutes_to_ms(minutes: float) -> float:
    """Convert whole or fractional minutes to milliseconds."""
    return float(minutes) * MS_PER_MINUTE
