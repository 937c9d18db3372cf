"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def epoch_now() -> int:
    """Current wall-clock time in whole epoch seconds."""
    return int(utc_now().timestamp())


def from_epoch(seconds: int) -> datetime:
    """Epoch seconds -> aware UTC datetime."""
    return datetime.fromtimestamp(seconds, tz=timezone.utc)
