"""Cache validity policy for stored versions."""

DEFAULT_CACHE_DURATION = 3600


def parse_timestamp(value: object) -> int | None:
    """Return ``value`` as a non-negative integer timestamp, or None if malformed."""
    # bool is an int subclass but never a timestamp
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def fresh_check_time(
    cached_version: str,
    last_checked: object,
    now: int,
    cache_duration: int = DEFAULT_CACHE_DURATION,
) -> int | None:
    """Return the cached check time if the cached version can be reused.

    All of the following must hold for a cache hit:
    - ``cached_version`` is non-empty
    - ``last_checked`` is a non-negative integer (or a string of digits)
    - ``now - last_checked < cache_duration``

    Args:
        cached_version: Version from the stored record
        last_checked: Stored timestamp, possibly missing or malformed
        now: Current time in seconds since epoch
        cache_duration: Seconds a stored version stays fresh

    Returns:
        The parsed ``last_checked`` on a hit, None when a live fetch is needed
    """
    if not cached_version:
        return None
    checked_at = parse_timestamp(last_checked)
    if checked_at is None or now - checked_at >= cache_duration:
        return None
    return checked_at


def is_cache_valid(
    cached_version: str,
    last_checked: object,
    now: int,
    cache_duration: int = DEFAULT_CACHE_DURATION,
) -> bool:
    """Decide whether a cached version can be reused without a live fetch."""
    return fresh_check_time(cached_version, last_checked, now, cache_duration) is not None
