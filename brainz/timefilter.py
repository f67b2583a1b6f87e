import time

from .errors import InvalidFilterError

UNIT_SECONDS = {
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "y": 365 * 24 * 60 * 60,
}


def parse_time_filter(value: str, now: int | None = None) -> int:
    """Turn a filter like ``"90m"`` or ``"2d"`` into an absolute cutoff timestamp.

    Units are m (minutes), h (hours), d (days) and y (365-day years). An empty
    filter means no cutoff and returns 0.
    """
    if not value:
        return 0
    if len(value) < 2:
        raise InvalidFilterError(f"time filter {value!r} is too short, expected <number><unit>")

    amount, unit = value[:-1], value[-1]
    if unit not in UNIT_SECONDS:
        raise InvalidFilterError(f"unknown time unit {unit!r} in {value!r}, expected one of m, h, d, y")

    if not (amount.isascii() and amount.isdigit()):
        raise InvalidFilterError(f"time filter amount {amount!r} is not a positive whole number")
    n = int(amount)
    if n <= 0:
        raise InvalidFilterError(f"time filter amount must be positive, got {n}")

    if now is None:
        now = int(time.time())
    return now - n * UNIT_SECONDS[unit]
