"""Pydantic schemas for podcast2youtube."""

import json
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


class PrivacyStatus(str, Enum):
    """YouTube video privacy status."""
    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"


class UploadRequest(BaseModel):
    """A single video to upload."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Video title")
    description: str = Field(default="", description="Video description")
    tags: tuple[str, ...] = Field(default=(), description="Video tags, in order")
    source_path: str = Field(..., description="Path to the video file")

    def video_body(self, privacy: PrivacyStatus = PrivacyStatus.UNLISTED) -> dict:
        """Build the `videos.insert` resource body for this request."""
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": list(self.tags),
            },
            "status": {
                "privacyStatus": privacy.value,
            },
        }


class ClientConfig(BaseModel):
    """OAuth client settings from a Google `client_secrets.json` file."""
    model_config = ConfigDict(frozen=True)

    client_type: Literal["installed", "web"] = "installed"
    client_id: str
    client_secret: str
    auth_uri: str = "https://accounts.google.com/o/oauth2/auth"
    token_uri: str = "https://oauth2.googleapis.com/token"
    redirect_uris: tuple[str, ...] = ()

    @classmethod
    def from_file(cls, path: Path) -> "ClientConfig":
        """Load and validate a client secrets file.

        Args:
            path: Path to the JSON file downloaded from Google Cloud Console

        Returns:
            Parsed client configuration

        Raises:
            ConfigError: If the file is unreadable, not JSON, or incomplete
        """
        try:
            with open(path, "r") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"could not open {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"could not parse config {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"could not parse config {path}: expected a JSON object")

        # Detect credential type (web or installed)
        for client_type in ("installed", "web"):
            if client_type in data:
                break
        else:
            raise ConfigError(
                f"could not parse config {path}: expected an 'installed' or 'web' section"
            )

        section = data[client_type]
        if not isinstance(section, dict):
            raise ConfigError(f"could not parse config {path}: '{client_type}' is not an object")

        try:
            return cls(client_type=client_type, **section)
        except (TypeError, ValidationError) as e:
            raise ConfigError(f"could not parse config {path}: {e}") from e

    def to_client_config(self) -> dict:
        """Return the dict shape expected by `google_auth_oauthlib.flow`."""
        return {
            self.client_type: {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": self.auth_uri,
                "token_uri": self.token_uri,
                "redirect_uris": list(self.redirect_uris),
            }
        }
