"""Duolingo account client.

Wraps the Duolingo HTTP endpoints as methods on one object holding the
credentials, the session token and the last fetched profile.

Endpoints:
- POST {host}/login                 -> session token in the "jwt" header
- GET  {host}/users/{username}      -> profile payload (cached)
- GET  {host}/vocabulary/overview   -> {"vocab_overview": [...]}
- POST {host}/switch_language       -> switch the learning language
- GET  {dictionary_host}/api/1/dictionary/hints/{source}/{target}?tokens=...

Every network method performs exactly one request. Nothing is retried and
only the profile is cached.
"""

from __future__ import annotations

import json
import time
from typing import Any, Literal
from urllib.parse import quote

import requests
import structlog

from duolingo_client.config.app_config import ClientConfig, load_client_config
from duolingo_client.core.profile import (
    Profile,
    ProfileNotLoadedError,
    UnknownLanguageError,
)
from duolingo_client.core.vocabulary import find_related_words
from duolingo_client.errors import DuolingoError

logger = structlog.get_logger(__name__)

HttpMethod = Literal["GET", "POST"]

# encodeURIComponent keeps these unescaped; the dictionary endpoint expects the same
_URI_COMPONENT_SAFE = "-_.!~*'()"


class DuolingoTransportError(DuolingoError):
    """HTTP request failed: connection, timeout, status or body decoding."""

    def __init__(self, message: str, url: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DuolingoAccount:
    """Client for one Duolingo account.

    Usage:
        account = DuolingoAccount("user", "secret")
        account.login()
        account.fetch_profile()
        account.get_learning_languages(abbreviations=True)
    """

    def __init__(
        self,
        username: str,
        password: str,
        config: ClientConfig | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize account client. No request is made.

        Args:
            username: Duolingo username
            password: Duolingo password
            config: Client configuration (loads from YAML if not provided)
            session: HTTP session to issue requests with
        """
        self._username = username
        self._password = password
        self.config = config or load_client_config()
        self._session = session or requests.Session()
        self._token: str | None = None
        self._profile: Profile | None = None

    @property
    def username(self) -> str:
        return self._username

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    @property
    def profile(self) -> Profile | None:
        """Last fetched profile snapshot, or None before fetch_profile()."""
        return self._profile

    # =========================================================================
    # REQUESTS
    # =========================================================================

    def _build_headers(self, method: HttpMethod) -> dict[str, str]:
        headers = {"User-Agent": self.config.user_agent}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        if method == "POST":
            headers["Content-Type"] = "application/json"
        return headers

    def api_request(
        self,
        method: HttpMethod,
        url: str,
        data: dict[str, Any] | None = None,
    ) -> requests.Response:
        """Send one request to a Duolingo endpoint.

        Args:
            method: "GET" or "POST"
            url: Full URL, e.g. https://www.duolingo.com/users/someone
            data: JSON body (POST only)

        Returns:
            The successful response

        Raises:
            DuolingoTransportError: On connection error, timeout or non-2xx status
        """
        headers = self._build_headers(method)
        body = json.dumps(data) if method == "POST" else None

        start_time = time.time()
        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                data=body,
                timeout=self.config.timeout,
            )
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("duolingo_request_failed", method=method, url=url, status=status)
            raise DuolingoTransportError(
                f"Duolingo respondió {status} para {method} {url}",
                url=url,
                status_code=status,
            ) from e
        except requests.exceptions.Timeout as e:
            logger.error("duolingo_request_timeout", method=method, url=url)
            raise DuolingoTransportError(
                f"Tiempo de espera agotado ({self.config.timeout}s) para {method} {url}",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.error("duolingo_request_failed", method=method, url=url, error=str(e))
            raise DuolingoTransportError(
                f"No se pudo conectar a {url}: {e}", url=url
            ) from e

        logger.debug(
            "duolingo_request",
            method=method,
            url=url,
            status=response.status_code,
            latency_ms=int((time.time() - start_time) * 1000),
        )
        return response

    def _json(self, response: requests.Response) -> Any:
        """Decode a JSON body."""
        try:
            return response.json()
        except ValueError as e:
            raise DuolingoTransportError(
                f"Respuesta no es JSON válido: {response.text[:200]}",
                url=response.url,
                status_code=response.status_code,
            ) from e

    # =========================================================================
    # NETWORK OPERATIONS
    # =========================================================================

    def login(self) -> Any:
        """Log in with the stored credentials.

        Stores the session token from the "jwt" response header; later
        requests send it as a bearer credential.

        Returns:
            Decoded login response body

        Raises:
            DuolingoTransportError: If the request fails
        """
        url = f"{self.config.host}/login"
        response = self.api_request(
            "POST", url, {"login": self._username, "password": self._password}
        )

        # A login without a jwt header drops any previous token
        self._token = response.headers.get("jwt") or None
        if self._token:
            logger.info("duolingo_login_succeeded", username=self._username)
        else:
            logger.warning("duolingo_login_missing_jwt", username=self._username)

        return self._json(response)

    def fetch_profile(self) -> dict[str, Any]:
        """Fetch and cache the user's profile.

        Replaces any previously cached profile.

        Returns:
            Raw profile payload
        """
        url = f"{self.config.host}/users/{self._username}"
        response = self.api_request("GET", url)
        payload = self._json(response)
        if not isinstance(payload, dict):
            raise DuolingoTransportError(
                f"Perfil inesperado: se esperaba un objeto JSON, llegó {type(payload).__name__}",
                url=url,
                status_code=response.status_code,
            )
        self._profile = Profile.from_payload(payload)

        logger.info(
            "duolingo_profile_fetched",
            username=self._username,
            languages=list(self._profile.language_codes),
        )
        return payload

    def fetch_vocabulary_overview(self) -> dict[str, Any]:
        """Fetch the vocabulary overview for the current learning language."""
        url = f"{self.config.host}/vocabulary/overview"
        return self._json(self.api_request("GET", url))

    def switch_learning_language(self, code: str) -> Any:
        """Switch the learning language, e.g. "es" or "fr".

        The cached profile is left as is; call fetch_profile() again to see
        the switched state.
        """
        url = f"{self.config.host}/switch_language"
        result = self._json(self.api_request("POST", url, {"learning_language": code}))
        logger.info("duolingo_language_switched", username=self._username, language=code)
        return result

    def fetch_translations(
        self,
        words: list[str],
        source: str | None = None,
        target: str | None = None,
    ) -> dict[str, Any]:
        """Get dictionary hints for a list of words.

        Args:
            words: Words to translate
            source: Source language code (default: profile UI language)
            target: Target language code (default: first language in the profile)

        Returns:
            Mapping of word to list of hints

        Raises:
            ProfileNotLoadedError: If a default is needed and no profile is cached
            UnknownLanguageError: If the profile cannot supply a needed default
        """
        if not source or not target:
            profile = self._require_profile("fetch_translations")
            source = source or profile.ui_language
            target = target or profile.default_target_language
            if not source or not target:
                raise UnknownLanguageError(None, list(profile.language_codes))

        tokens = quote(
            json.dumps(words, separators=(",", ":"), ensure_ascii=False),
            safe=_URI_COMPONENT_SAFE,
        )
        url = (
            f"{self.config.dictionary_host}/api/1/dictionary/hints/"
            f"{source}/{target}?tokens={tokens}"
        )
        return self._json(self.api_request("GET", url))

    def get_related_words(self, word: str) -> list[dict[str, Any]]:
        """Vocabulary entries related to a word, from a fresh overview fetch."""
        return find_related_words(self.fetch_vocabulary_overview(), word)

    # =========================================================================
    # PROFILE ACCESSORS
    # =========================================================================

    def _require_profile(self, operation: str) -> Profile:
        if self._profile is None:
            raise ProfileNotLoadedError(operation)
        return self._profile

    def get_learning_languages(self, abbreviations: bool = False) -> list[str]:
        """Languages the user is learning.

        Args:
            abbreviations: If True, return 'es' instead of 'Spanish'
        """
        return self._require_profile("get_learning_languages").learning_languages(
            abbreviations
        )

    def get_profile_summary(self) -> list[Any]:
        """Fixed selection of profile fields, in SUMMARY_FIELDS order."""
        return self._require_profile("get_profile_summary").summary()

    def get_profile_summary_dict(self) -> dict[str, Any]:
        return self._require_profile("get_profile_summary").summary_dict()

    def get_learned_skills(self, lang: str) -> list[dict[str, Any]]:
        """Learned skills for a language, most recently learned first.

        Raises:
            ProfileNotLoadedError: If no profile is cached
            UnknownLanguageError: If lang is not in the profile's language data
        """
        return self._require_profile("get_learned_skills").learned_skills(lang)

    def get_learned_words(self, lang: str) -> list[str]:
        return self._require_profile("get_learned_words").learned_words(lang)

    def get_known_topics(self, lang: str) -> list[str]:
        return self._require_profile("get_known_topics").known_topics(lang)

    def get_skills(self, lang: str) -> list[dict[str, Any]]:
        return self._require_profile("get_skills").skills(lang)

    def get_cached_profile_keys(self) -> list[str]:
        return self._require_profile("get_cached_profile_keys").keys()

    def is_learning_language(self, code: str) -> bool:
        """Whether code is a key of the profile's per-language data."""
        return self._require_profile("is_learning_language").has_language(code)


__all__ = [
    "DuolingoAccount",
    "DuolingoError",
    "DuolingoTransportError",
    "ProfileNotLoadedError",
    "UnknownLanguageError",
]
