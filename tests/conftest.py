"""Shared fixtures for podcast2youtube tests."""

import json

import pytest
from google.oauth2.credentials import Credentials
from googleapiclient.http import HttpMockSequence


class RecordingHttp(HttpMockSequence):
    """HttpMockSequence that keeps every request, draining streamed bodies."""

    def __init__(self, iterable):
        super().__init__(iterable)
        self.requests = []

    def request(self, uri, method="GET", body=None, headers=None, redirections=1, connection_type=None):
        if hasattr(body, "read"):
            body = body.read()
        self.requests.append({
            "uri": uri,
            "method": method,
            "body": body,
            "headers": {k.lower(): v for k, v in (headers or {}).items()},
        })
        return super().request(uri, method, body, headers, redirections, connection_type)


UPLOAD_SESSION_URI = "https://youtube.googleapis.com/upload/youtube/v3/videos?upload_id=abc"


def upload_responses(video_id="vid123", title="Ep 1"):
    """Responses for a resumable session start followed by the media PUT."""
    return [
        ({"status": "200", "location": UPLOAD_SESSION_URI}, ""),
        ({"status": "200"}, json.dumps({
            "id": video_id,
            "snippet": {"title": title},
            "status": {"privacyStatus": "unlisted"},
        })),
    ]


@pytest.fixture
def client_config():
    return {
        "installed": {
            "client_id": "123-abc.apps.googleusercontent.com",
            "project_id": "podcast-uploads",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "client_secret": "not-a-real-secret",
            "redirect_uris": ["urn:ietf:wg:oauth:2.0:oob", "http://localhost"],
        }
    }


@pytest.fixture
def client_secrets(tmp_path, client_config):
    path = tmp_path / "client_secrets.json"
    path.write_text(json.dumps(client_config))
    return path


@pytest.fixture
def credentials():
    return Credentials(token="fake-access-token")


@pytest.fixture
def video_file(tmp_path):
    """A 10MB file with non-repeating content."""
    path = tmp_path / "ep1.mp4"
    block = bytes(range(256)) * 4096
    path.write_bytes(b"".join(block[i:] + block[:i] for i in range(10)))
    return path


@pytest.fixture
def make_http():
    """Factory for a recording transport replaying the given responses."""
    return RecordingHttp


@pytest.fixture
def upload_http():
    """Transport that accepts one upload and returns video `vid123`."""
    return RecordingHttp(upload_responses())
