"""Video upload to YouTube."""

import logging
import mimetypes
from typing import Optional, Sequence

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import Resource, build
from googleapiclient.errors import Error as GoogleApiClientError
from googleapiclient.http import MediaIoBaseUpload

from .auth import Authorizer, authorize
from .config import (
    API_SERVICE_NAME,
    API_VERSION,
    FALLBACK_MIMETYPE,
    UPLOAD_PRIVACY,
    VIDEO_PARTS,
)
from .errors import FileError, UploadError
from .progress import progress_reader
from .schemas import UploadRequest

logger = logging.getLogger(__name__)


def get_youtube_service(http: httplib2.Http) -> Resource:
    """Build a YouTube Data API client on top of an authorized transport.

    Raises:
        UploadError: If the client cannot be created
    """
    try:
        return build(
            API_SERVICE_NAME,
            API_VERSION,
            http=http,
            cache_discovery=False,
            static_discovery=True,
        )
    except GoogleApiClientError as e:
        raise UploadError(f"could not create YouTube client: {e}") from e


def video_mimetype(path: str) -> str:
    """Guess a video mimetype from the file name."""
    mimetype, _ = mimetypes.guess_type(path)
    if mimetype and mimetype.startswith("video/"):
        return mimetype
    return FALLBACK_MIMETYPE


def upload_video(youtube: Resource, request: UploadRequest) -> None:
    """Upload a video as an unlisted YouTube video.

    The file is sent as a single streamed body. A failed transfer is not
    retried or resumed.

    Args:
        youtube: Authorized YouTube Data API client
        request: Metadata and source file of the video

    Raises:
        FileError: If the source file cannot be opened
        UploadError: If the transfer fails or YouTube rejects the video
    """
    body = request.video_body(UPLOAD_PRIVACY)

    try:
        f = open(request.source_path, "rb")
    except OSError as e:
        raise FileError(f"could not open {request.source_path}: {e}") from e

    with f:
        print("uploading video to YouTube")
        reader = progress_reader(f, desc=request.title)
        try:
            media = MediaIoBaseUpload(
                reader,
                mimetype=video_mimetype(request.source_path),
                chunksize=-1,
                resumable=True,
            )
            response = youtube.videos().insert(
                part=VIDEO_PARTS,
                body=body,
                media_body=media,
            ).execute()
        except (GoogleApiClientError, httplib2.HttpLib2Error, GoogleAuthError, OSError) as e:
            raise UploadError(f"could not upload: {e}") from e
        finally:
            if reader is not f:
                reader.close()

    logger.info("Uploaded %s as video %s", request.source_path, response.get("id"))


def upload_to_youtube(
    title: str,
    description: str,
    tags: Sequence[str],
    path: str,
    *,
    authorizer: Optional[Authorizer] = None,
    http: Optional[httplib2.Http] = None,
) -> None:
    """Upload the video at `path` to YouTube with the given details.

    Unless another authorizer is given this prompts an offline
    authentication flow on the console.

    Args:
        title: Video title
        description: Video description
        tags: Video tags
        path: Path to the video file
        authorizer: Credential strategy (default: console flow)
        http: Underlying transport for all API requests

    Raises:
        ConfigError: If the client secrets are missing or malformed
        AuthError: If authorization fails
        FileError: If the video file cannot be opened
        UploadError: If the upload fails
        TypeError: If `tags` is a single string
    """
    if isinstance(tags, str):
        raise TypeError("tags must be a sequence of strings, not a single str")

    request = UploadRequest(
        title=title,
        description=description,
        tags=list(tags),
        source_path=path,
    )

    authed_http = authorize(authorizer, http=http)
    youtube = get_youtube_service(authed_http)
    upload_video(youtube, request)
