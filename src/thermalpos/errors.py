"""Exceptions raised while building printer commands."""


class EncodingError(Exception):
    """Base exception for command encoding errors."""

    pass


class ValueOutOfRange(EncodingError, ValueError):
    """A numeric field is outside the bounds the protocol allows."""

    pass


class MalformedInput(EncodingError, ValueError):
    """Required dimensions or image data are missing or inconsistent."""

    pass


class UnknownConfigurationKey(EncodingError, LookupError):
    """A string-keyed setting does not name a known protocol option."""

    pass


class UnsupportedOperation(EncodingError, NotImplementedError):
    """The requested command is intentionally not implemented."""

    pass
