"""Id generator protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class IdGeneratorProtocol(Protocol):
    """Protocol for template id sources."""

    def new_id(self, prefix: str) -> str:
        """Generate a new identifier.

        Args:
            prefix: Readable prefix, e.g. "custom" or "imported".

        Returns:
            Identifier string starting with the prefix.
        """
        ...
