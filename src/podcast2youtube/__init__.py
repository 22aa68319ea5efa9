"""Upload a local video to YouTube through an offline OAuth flow."""

from .auth import (
    Authorizer,
    ConsoleAuthorizer,
    RefreshTokenAuthorizer,
    StaticAuthorizer,
    authorize,
)
from .errors import (
    AuthError,
    ConfigError,
    ExchangeError,
    FileError,
    UploadError,
    UploaderError,
)
from .schemas import ClientConfig, PrivacyStatus, UploadRequest
from .upload import get_youtube_service, upload_to_youtube, upload_video

__all__ = [
    # Auth
    "Authorizer",
    "ConsoleAuthorizer",
    "RefreshTokenAuthorizer",
    "StaticAuthorizer",
    "authorize",
    # Errors
    "AuthError",
    "ConfigError",
    "ExchangeError",
    "FileError",
    "UploadError",
    "UploaderError",
    # Schemas
    "ClientConfig",
    "PrivacyStatus",
    "UploadRequest",
    # Upload
    "get_youtube_service",
    "upload_to_youtube",
    "upload_video",
]
