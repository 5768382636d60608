"""Exceptions raised by webcharset."""


class NoInputError(ValueError):
    """Raised when :meth:`CharsetDetector.detect` is given no content at all.

    Failing to identify an encoding is not an error (the default encoding is
    returned instead); only a missing buffer is.
    """
