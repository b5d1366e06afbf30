"""Contains exceptions raised when reading or rewriting build descriptors."""

from pathlib import Path


class DescriptorParseError(Exception):
    """Raised when a descriptor is not well-formed XML."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initializes the exception with the descriptor path and the parser message."""
        super().__init__(f"Failed to parse descriptor {path}: {reason}")
        self.path = path
        self.reason = reason


class DescriptorPropertyNotFoundError(Exception):
    """Raised when a descriptor does not define the expected property."""

    def __init__(self, path: Path, property_name: str) -> None:
        """Initializes the exception with the descriptor path and the missing property."""
        super().__init__(f"Property '{property_name}' not found in descriptor {path}")
        self.path = path
        self.property_name = property_name
