"""OAuth 2.0 authorization for YouTube uploads."""

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence

import httplib2
from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_httplib2 import AuthorizedHttp
from google_auth_oauthlib.flow import InstalledAppFlow

from .config import DEFAULT_CLIENT_SECRETS, OOB_REDIRECT_URI, UPLOAD_SCOPES
from .errors import AuthError, ExchangeError
from .schemas import ClientConfig

logger = logging.getLogger(__name__)


class Authorizer(Protocol):
    """Strategy for obtaining credentials for a set of scopes."""

    def get_credentials(self, scopes: Sequence[str]) -> Credentials:
        ...


class ConsoleAuthorizer:
    """Offline authorization flow driven from the console.

    Prints an authorization URL, waits for the operator to paste the code
    Google shows after consent, and exchanges it for tokens. Tokens stay in
    memory and are never written to disk.
    """

    def __init__(
        self,
        client_secret_path: Optional[Path] = None,
        redirect_uri: str = OOB_REDIRECT_URI,
        prompt: Callable[[str], str] = input,
        echo: Callable[[str], None] = print,
    ):
        """Initialize the console flow.

        Args:
            client_secret_path: Path to OAuth client secret JSON file
            redirect_uri: Redirect URI registered for the client
            prompt: Reads one line of operator input
            echo: Writes one line of operator output
        """
        self.client_secret_path = client_secret_path or DEFAULT_CLIENT_SECRETS
        self.redirect_uri = redirect_uri
        self._prompt = prompt
        self._echo = echo
        self._credentials: Optional[Credentials] = None

    def get_credentials(self, scopes: Sequence[str]) -> Credentials:
        """Run the flow once and return the resulting credentials.

        Raises:
            ConfigError: If the client secrets file is missing or malformed
            ExchangeError: If no code is entered or the code is rejected
        """
        if self._credentials is not None:
            return self._credentials

        client_config = ClientConfig.from_file(self.client_secret_path)

        flow = InstalledAppFlow.from_client_config(
            client_config.to_client_config(),
            scopes=list(scopes),
            redirect_uri=self.redirect_uri,
        )
        auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")

        self._echo(f"Go here: \n\t{auth_url}")
        try:
            code = self._prompt("Then enter the code: ").strip()
        except EOFError as e:
            raise ExchangeError("no authorization code entered") from e

        try:
            flow.fetch_token(code=code)
        except Exception as e:
            raise ExchangeError(f"could not exchange authorization code: {e}") from e

        logger.info("Authorization code exchanged for %s", ", ".join(scopes))
        self._credentials = flow.credentials
        return self._credentials


class StaticAuthorizer:
    """Hands out credentials obtained elsewhere."""

    def __init__(self, credentials: Credentials):
        self._credentials = credentials

    def get_credentials(self, scopes: Sequence[str]) -> Credentials:
        return self._credentials


class RefreshTokenAuthorizer:
    """Non-interactive authorization from an existing refresh token.

    Useful on headless hosts where the console flow was run once elsewhere.
    The refresh token is passed in by the caller and is not stored.
    """

    def __init__(self, refresh_token: str, client_secret_path: Optional[Path] = None):
        self.refresh_token = refresh_token
        self.client_secret_path = client_secret_path or DEFAULT_CLIENT_SECRETS

    def get_credentials(self, scopes: Sequence[str]) -> Credentials:
        """Refresh an access token.

        Raises:
            ConfigError: If the client secrets file is missing or malformed
            AuthError: If the token endpoint refuses the refresh token
        """
        client_config = ClientConfig.from_file(self.client_secret_path)

        credentials = Credentials(
            token=None,
            refresh_token=self.refresh_token,
            token_uri=client_config.token_uri,
            client_id=client_config.client_id,
            client_secret=client_config.client_secret,
            scopes=list(scopes),
        )
        try:
            credentials.refresh(Request())
        except (RefreshError, TransportError) as e:
            raise AuthError(f"could not refresh access token: {e}") from e

        return credentials


def authorize(
    authorizer: Optional[Authorizer] = None,
    scopes: Sequence[str] = UPLOAD_SCOPES,
    http: Optional[httplib2.Http] = None,
) -> AuthorizedHttp:
    """Obtain credentials and wrap them in an authorized transport.

    Args:
        authorizer: Credential strategy (default: interactive console flow)
        scopes: OAuth scopes to request
        http: Underlying transport (default: a fresh httplib2.Http)

    Returns:
        Transport that attaches the access token to every request
    """
    authorizer = authorizer or ConsoleAuthorizer()
    credentials = authorizer.get_credentials(scopes)
    return AuthorizedHttp(credentials, http=http)
