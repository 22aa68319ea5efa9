"""Exceptions raised by podcast2youtube."""


class UploaderError(Exception):
    """Base class for every failure of an upload run."""


class ConfigError(UploaderError):
    """OAuth client secrets are missing, unreadable or malformed."""


class AuthError(UploaderError):
    """Credentials could not be obtained."""


class ExchangeError(AuthError):
    """The authorization code could not be exchanged for tokens."""


class FileError(UploaderError):
    """The source video cannot be opened or read."""


class UploadError(UploaderError):
    """The platform rejected the upload or the transfer failed."""
