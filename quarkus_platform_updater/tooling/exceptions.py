"""Contains exceptions raised by local version control and build operations."""


class ExternalCommandError(Exception):
    """Raised when an external command exits with a non-zero code."""

    def __init__(self, step: str, command: list[str], returncode: int) -> None:
        """Initializes the exception with the failing step, its command line and exit code."""
        super().__init__(f"Step '{step}' failed: command '{' '.join(command)}' exited with code {returncode}")
        self.step = step
        self.command = command
        self.returncode = returncode
