"""Domain-specific errors for eddyctl."""


class EddyctlError(Exception):
    """Base error for eddyctl."""


class DecodeError(EddyctlError):
    """Base for frame decode failures.

    Decode operations return instances of these rather than raising them.
    """


class TruncatedFrameError(DecodeError):
    """Returned when a buffer is shorter than its frame type requires."""


class InvalidSchemeError(DecodeError):
    """Returned when a URL frame carries an undefined scheme byte."""


class MalformedURLError(DecodeError):
    """Returned when a reconstructed URL cannot be parsed."""


class UnrecognizedFrameTypeError(DecodeError):
    """Returned when the leading byte matches no Eddystone frame type."""


class UrlEncodeError(EddyctlError):
    """Raised when a URL cannot be compressed into an Eddystone-URL body."""


class ConfigLoadError(EddyctlError):
    """Raised when reading a configuration file fails."""


class ConfigValidationError(EddyctlError):
    """Raised when configuration does not conform to schema or semantics."""


class CaptureLoadError(EddyctlError):
    """Raised when reading a capture file fails."""


class CaptureValidationError(EddyctlError):
    """Raised when a capture file does not conform to schema."""


class InvalidHexError(EddyctlError):
    """Raised when user-supplied hex text cannot be turned into bytes."""
