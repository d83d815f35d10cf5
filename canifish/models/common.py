"""Common helpers shared across models."""

from datetime import datetime


def local_now() -> datetime:
    """Aware datetime in the host's local zone; dates follow the local calendar."""
    return datetime.now().astimezone()
