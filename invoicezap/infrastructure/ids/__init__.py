"""Id generators."""
from .timestamp_ids import TimestampIdGenerator

__all__ = ["TimestampIdGenerator"]
