"""
Token Provider
Injectable access-token capability for LLM providers with short-lived
OAuth tokens.

    with OAuthTokenFetcher(auth_key) as fetcher:
        provider = TokenProvider(fetcher)
        token = provider.acquire()      # cached until shortly before expiry
        provider.schedule_renewal()     # background refresh ahead of expiry

    provider = TokenProvider.from_settings(settings)

The provider owns its state; nothing is kept in module globals.
"""

import threading
import time
import uuid
from typing import Callable, Optional

import httpx

from config.constants import (
    API_TIMEOUT_SECONDS,
    GIGACHAT_AUTH_URL,
    GIGACHAT_SCOPE,
    TOKEN_EXPIRY_MARGIN_SECONDS,
    TOKEN_MIN_REFRESH_DELAY_SECONDS,
    TOKEN_REFRESH_LEAD_SECONDS,
    TOKEN_RETRY_DELAY_SECONDS,
)
from config.logging_config import get_logger

from .base import AccessToken

logger = get_logger(__name__)

PREVIEW_CHARS = 100


class TokenFetchError(RuntimeError):
    """The token endpoint rejected the request or returned an unreadable body"""
    pass


class OAuthTokenFetcher:
    """
    Fetch access tokens from an OAuth endpoint with a Basic auth key.

    The endpoint returns {"access_token": ..., "expires_at": <epoch ms>}.

    A client passed in stays owned by the caller; a client created here is
    closed by close() or on leaving the `with` block.
    """

    def __init__(
        self,
        auth_key: str,
        url: str = GIGACHAT_AUTH_URL,
        scope: str = GIGACHAT_SCOPE,
        client: Optional[httpx.Client] = None,
    ):
        self.auth_key = _sanitize_key(auth_key)
        self.url = url
        self.scope = scope
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=API_TIMEOUT_SECONDS)

    def __call__(self) -> AccessToken:
        logger.info("Refreshing access token")
        response = self._client.post(
            self.url,
            headers={
                'Content-Type': 'application/x-www-form-urlencoded',
                'Accept': 'application/json',
                'RqUID': str(uuid.uuid4()),
                'Authorization': f'Basic {self.auth_key}',
            },
            content=f'scope={self.scope}',
        )

        if response.status_code >= 400:
            logger.error(f"Token fetch failed: {response.status_code} - {response.text}")
            raise TokenFetchError(f"Token fetch failed: {response.status_code} - {response.text}")

        try:
            data = response.json()
            return AccessToken(
                value=data['access_token'],
                expires_at=float(data['expires_at']) / 1000.0,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TokenFetchError(
                f"Malformed token response: {response.text[:PREVIEW_CHARS]}"
            ) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "OAuthTokenFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def _sanitize_key(auth_key: str) -> str:
    key = (auth_key or '').strip()
    if key.lower().startswith('basic '):
        key = key[len('basic '):].strip()
    return key


class TokenProvider:
    """
    Cache an access token and renew it ahead of expiry.

    Args:
        fetch: Callable returning a fresh AccessToken
        clock: Returns the current epoch time in seconds
        expiry_margin: A token this close to expiry is not handed out
        refresh_lead: Background renewal fires this long before expiry
        retry_delay: Wait before retrying a failed background renewal
    """

    def __init__(
        self,
        fetch: Callable[[], AccessToken],
        clock: Callable[[], float] = time.time,
        expiry_margin: float = TOKEN_EXPIRY_MARGIN_SECONDS,
        refresh_lead: float = TOKEN_REFRESH_LEAD_SECONDS,
        retry_delay: float = TOKEN_RETRY_DELAY_SECONDS,
    ):
        self._fetch = fetch
        self._clock = clock
        self.expiry_margin = expiry_margin
        self.refresh_lead = refresh_lead
        self.retry_delay = retry_delay

        self._token: Optional[AccessToken] = None
        self._lock = threading.Lock()

        # Guards _timer and _cancelled
        self._timer_lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._cancelled = False

    @classmethod
    def from_settings(
        cls,
        settings,
        client: Optional[httpx.Client] = None,
        clock: Callable[[], float] = time.time,
    ) -> "TokenProvider":
        """
        Build a provider backed by OAuthTokenFetcher from application settings.

        Raises:
            ValueError: GIGACHAT_AUTH_KEY is not configured
        """
        fetcher = OAuthTokenFetcher(
            settings.get_auth_key(),
            url=settings.gigachat_auth_url,
            scope=settings.gigachat_scope,
            client=client,
        )
        return cls(
            fetcher,
            clock=clock,
            expiry_margin=settings.token_expiry_margin_seconds,
            refresh_lead=settings.token_refresh_lead_seconds,
        )

    @property
    def token(self) -> Optional[AccessToken]:
        return self._token

    def acquire(self) -> str:
        """Return a valid token value, fetching a new one if needed."""
        with self._lock:
            if self._token is not None and self._is_fresh(self._token):
                return self._token.value
            self._token = self._fetch()
            return self._token.value

    def refresh(self) -> AccessToken:
        """Fetch a new token unconditionally."""
        token = self._fetch()
        with self._lock:
            self._token = token
        return token

    def schedule_renewal(self) -> float:
        """
        Arm a background refresh before the current token expires.

        Returns:
            Delay in seconds until the refresh fires
        """
        with self._timer_lock:
            self._cancelled = False
        return self._schedule()

    def cancel(self) -> None:
        """Stop any pending renewal; a renewal in flight does not re-arm."""
        with self._timer_lock:
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _is_fresh(self, token: AccessToken) -> bool:
        return self._clock() < token.expires_at - self.expiry_margin

    def _schedule(self) -> float:
        if self._token is None:
            self.acquire()

        expires_in = self._token.expires_in(self._clock())
        delay = max(TOKEN_MIN_REFRESH_DELAY_SECONDS, expires_in - self.refresh_lead)
        self._arm(delay)
        return delay

    def _arm(self, delay: float) -> None:
        with self._timer_lock:
            if self._cancelled:
                return
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(delay, self._renew)
            self._timer.daemon = True
            self._timer.start()

    def _renew(self) -> None:
        try:
            self.refresh()
        except Exception as e:
            logger.error(f"Failed to refresh access token, retrying in {self.retry_delay}s: {e}")
            self._arm(self.retry_delay)
            return

        logger.info("Access token refreshed")
        self._schedule()
