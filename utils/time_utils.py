from typing import Any


def format_duration(seconds: Any) -> str:
    """Render elapsed seconds as ``H:MM:SS`` (hours are not zero-padded).

    Negative, non-numeric or infinite input renders as ``0:00:00``.
    """
    try:
        total = int(float(seconds))
    except (TypeError, ValueError, OverflowError):
        return "0:00:00"
    if total < 0:
        return "0:00:00"
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours}:{minutes:02d}:{secs:02d}"
