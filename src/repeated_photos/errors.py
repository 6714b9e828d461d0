"""Error taxonomy for the duplicate finder."""


class RepeatedPhotosError(Exception):
    """Base class for all errors raised by repeated_photos."""


class DecodeError(RepeatedPhotosError):
    """Raised when image bytes are unreadable or in an unsupported format."""


class FilesystemError(RepeatedPhotosError):
    """Raised when a path cannot be read (missing, permission denied, ...)."""


class ConfigurationError(RepeatedPhotosError):
    """Raised when settings are invalid. Fatal, surfaced before any work starts."""
