"""Exception hierarchy.

Every failure of a composition call surfaces as one of these; nothing is
retried and nothing is swallowed.
"""

INVALID_FORMAT_MESSAGE = "Invalid skin format."


class SkinViewerError(Exception):
    """Base class for all skin viewer failures."""


class LoadError(SkinViewerError):
    """The texture could not be fetched or decoded.

    The message is the underlying error's own text and the original exception
    is chained as ``__cause__``.
    """


class FormatError(SkinViewerError, ValueError):
    """Texture dimensions match none of the supported formats."""

    def __init__(self, message: str = INVALID_FORMAT_MESSAGE):
        super().__init__(message)
