import math


def format_time(seconds: float) -> str:
    """
    Formats a position/duration in seconds as MM:SS.
    Negative or NaN input renders as 00:00.
    """
    if seconds is None or math.isnan(seconds) or seconds < 0:
        seconds = 0
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"


def clamp(value: float, low: float, high: float) -> float:
    return min(high, max(low, float(value)))


def safe_duration(value) -> float:
    """
    Durations reported by metadata readers or the media backend can be
    None, NaN, or negative. Anything unusable is 0.0.
    """
    try:
        d = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(d) or math.isinf(d) or d < 0:
        return 0.0
    return d
