"""Contains exceptions raised when reading the platforms API."""


class UnexpectedPlatformsResponseError(Exception):
    """Raised when the platforms API answers with a body that does not have the expected shape."""

    def __init__(self, url: str, reason: str) -> None:
        """Initializes the exception with the queried URL and what was wrong with the body."""
        super().__init__(f"Unexpected response from {url}: {reason}")
        self.url = url
        self.reason = reason
