"""Static settings for YouTube uploads."""

from pathlib import Path

from .schemas import PrivacyStatus

# Resolved against the working directory of the process
DEFAULT_CLIENT_SECRETS = Path("client_secrets.json")

UPLOAD_SCOPE = "https://www.googleapis.com/auth/youtube.upload"
UPLOAD_SCOPES = [UPLOAD_SCOPE]

# Manual code entry, the user pastes the code shown by Google
OOB_REDIRECT_URI = "urn:ietf:wg:oauth:2.0:oob"

API_SERVICE_NAME = "youtube"
API_VERSION = "v3"
VIDEO_PARTS = "snippet,status"

UPLOAD_PRIVACY = PrivacyStatus.UNLISTED
FALLBACK_MIMETYPE = "application/octet-stream"
