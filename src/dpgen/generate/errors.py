"""Errors raised while validating and writing generated files."""


class GenerationError(Exception):
    """Base class for user-facing generation failures."""


class ReservedNameError(GenerationError):
    """The requested name collides with a Python keyword."""


class InvalidNameError(GenerationError):
    """The requested name cannot be used as a Python module or class name."""


class InvalidModelNameError(GenerationError):
    """The bound model name contains characters outside the allowed set."""


class AlreadyExistsError(GenerationError):
    """A target file exists and the write was not forced."""

    def __init__(self, path: str, label: str = "File"):
        super().__init__(f"{label} already exists.")
        self.path = path
