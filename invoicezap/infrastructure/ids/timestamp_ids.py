import secrets
import time


class TimestampIdGenerator:
    """Ids made of a millisecond timestamp and a random hex suffix."""

    def __init__(self, suffix_length: int = 6):
        """Initialize generator.

        Args:
            suffix_length: Number of hex characters after the timestamp.
        """
        self._suffix_bytes = max(1, (suffix_length + 1) // 2)
        self._suffix_length = suffix_length

    def new_id(self, prefix: str) -> str:
        millis = int(time.time() * 1000)
        suffix = secrets.token_hex(self._suffix_bytes)[: self._suffix_length]
        return f"{prefix}-{millis}-{suffix}"
