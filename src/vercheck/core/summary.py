"""Aggregate freshness summary across all repositories."""

from vercheck.core.store.abc import VersionStore

SECONDS_PER_HOUR = 3600


def hours_since(timestamp: int, now: int) -> int:
    return (now - timestamp) // SECONDS_PER_HOUR


def summarize_last_success(store: VersionStore, now: int) -> str:
    """Describe how long ago any repository was last fetched successfully.

    Returns:
        "(last success: {hours}h ago)", or "" if no successful check was ever
        recorded
    """
    last_success = store.max_last_checked_where_status_ok()
    if not last_success:
        return ""
    return f"(last success: {hours_since(last_success, now)}h ago)"
