"""Errors raised by the weight statistics functions."""


class InvalidArgumentError(TypeError):
    """Raised when a caller passes a value of the wrong kind.

    Malformed data rows never raise; they are skipped and counted. This error
    signals a programming mistake such as passing ``None`` where a list of
    samples is required.
    """
