"""Protocol interfaces for dependency injection."""
from .id_generator import IdGeneratorProtocol

__all__ = [
    "IdGeneratorProtocol",
]
