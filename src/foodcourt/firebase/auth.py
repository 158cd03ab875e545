"""
Firebase Authentication proxy.

Sign-up and sign-in go through the Identity Toolkit REST API, the same
endpoints the Firebase client SDKs call. The user object returned by the
backend is handed back unchanged. A process-wide session keeps the signed-in
user and notifies subscribers when it changes.
"""

import logging
import threading
from typing import Any, Callable

import requests

from foodcourt.config import FirebaseConfig

logger = logging.getLogger(__name__)

IDENTITY_TOOLKIT_URL = "https://identitytoolkit.googleapis.com/v1/accounts"
GOOGLE_PROVIDER_ID = "google.com"

AuthUser = dict[str, Any]
AuthCallback = Callable[[AuthUser | None], None]


class AuthError(Exception):
    """Raised when the auth backend rejects a request."""

    def __init__(self, code: str, status_code: int | None = None):
        super().__init__(code)
        self.code = code
        self.status_code = status_code


class AuthSession:
    """Currently signed-in user and the listeners interested in it."""

    def __init__(self):
        self._lock = threading.Lock()
        self._user: AuthUser | None = None
        self._listeners: list[AuthCallback] = []

    @property
    def user(self) -> AuthUser | None:
        return self._user

    def set_user(self, user: AuthUser | None):
        with self._lock:
            self._user = user
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(user)
            except Exception:
                logger.exception("Auth state listener failed")

    def subscribe(self, callback: AuthCallback) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(callback)
            user = self._user
        callback(user)

        def unsubscribe():
            with self._lock:
                if callback in self._listeners:
                    self._listeners.remove(callback)

        return unsubscribe


_session = AuthSession()


def _post(config: FirebaseConfig, action: str, payload: dict[str, Any]) -> AuthUser:
    if not config.api_key:
        raise ValueError("Firebase api_key is not configured")

    url = f"{IDENTITY_TOOLKIT_URL}:{action}"
    response = requests.post(
        url,
        params={"key": config.api_key},
        json={**payload, "returnSecureToken": True},
        timeout=config.auth_timeout,
    )

    if response.status_code != 200:
        try:
            code = response.json()["error"]["message"]
        except (ValueError, KeyError, TypeError):
            code = response.text or f"HTTP {response.status_code}"
        logger.warning("Auth %s rejected: %s", action, code)
        raise AuthError(code, response.status_code)

    return response.json()


def register_with_email(config: FirebaseConfig, email: str, password: str) -> AuthUser:
    """Create an email/password account and sign it in."""
    user = _post(config, "signUp", {"email": email, "password": password})
    _session.set_user(user)
    return user


def sign_in_with_email(config: FirebaseConfig, email: str, password: str) -> AuthUser:
    user = _post(config, "signInWithPassword", {"email": email, "password": password})
    _session.set_user(user)
    return user


def sign_in_with_google(
    config: FirebaseConfig,
    id_token: str,
    request_uri: str = "http://localhost",
) -> AuthUser:
    """
    Sign in with a Google ID token obtained from the Google OAuth flow.

    Args:
        config: Firebase configuration
        id_token: Google-issued OpenID Connect ID token
        request_uri: Redirect URI registered for the OAuth client

    Returns:
        The backend user object
    """
    user = _post(
        config,
        "signInWithIdp",
        {
            "postBody": f"id_token={id_token}&providerId={GOOGLE_PROVIDER_ID}",
            "requestUri": request_uri,
            "returnIdpCredential": True,
        },
    )
    _session.set_user(user)
    return user


def sign_out_user() -> None:
    _session.set_user(None)


def current_user() -> AuthUser | None:
    return _session.user


def on_auth_changed(callback: AuthCallback) -> Callable[[], None]:
    """
    Subscribe to sign-in/sign-out changes.

    The callback fires immediately with the current user (or None), then on
    every change. Returns the unsubscribe handle.
    """
    return _session.subscribe(callback)


def reset_session():
    """Drop the signed-in user and all listeners (useful for testing)."""
    global _session
    _session = AuthSession()
