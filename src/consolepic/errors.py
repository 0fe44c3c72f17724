class ConsoleImageError(Exception):
    """Base class for errors raised while building or drawing a console image."""


class SourceUnavailableError(ConsoleImageError):
    """The image path or URL could not be read or decoded."""


class EmptyImageError(ConsoleImageError):
    """A still image was drawn before its pixel index was built."""

    def __init__(self, message: str = "Image cannot be empty."):
        super().__init__(message)
