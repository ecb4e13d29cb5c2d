"""Check the latest released versions of upstream repositories."""
