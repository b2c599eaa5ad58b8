"""Profile snapshot and queries.

Responsibilities:
- Wrap the user payload returned by GET /users/{username}
- Capture the per-language keys in payload order at load time
- Answer read-only queries (languages, skills, words, topics, summary)

Queries never touch the network. The account client owns fetching and
hands the payload to Profile.from_payload().
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Any

from duolingo_client.errors import DuolingoError

# Summary projection, in output order
SUMMARY_FIELDS: tuple[str, ...] = (
    "username",
    "bio",
    "id",
    "num_followers",
    "num_following",
    "cohort",
    "language_data",
    "learning_language_string",
    "created",
    "contribution_points",
    "gplus_id",
    "twitter_id",
    "admin",
    "invites_left",
    "location",
    "fullname",
    "avatar",
    "ui_language",
)


class ProfileNotLoadedError(DuolingoError):
    """Raised when profile data is read before any successful fetch."""

    def __init__(self, operation: str | None = None):
        self.operation = operation
        detail = f" ({operation})" if operation else ""
        super().__init__(
            f"No hay perfil cargado{detail}. Llama primero a fetch_profile()"
        )


class UnknownLanguageError(DuolingoError):
    """Raised when a language code is not in the profile's language data.

    language is None when the profile lacks a default language
    (ui_language or any language_data entry).
    """

    def __init__(self, language: str | None, available: list[str]):
        self.language = language
        self.available = available
        if language is None:
            message = "El perfil no define un idioma por defecto"
        else:
            message = f"Idioma '{language}' no encontrado en el perfil"
        super().__init__(
            f"{message}. Disponibles: "
            + (", ".join(available) if available else "(ninguno)")
        )


def _compare_skills(a: dict[str, Any], b: dict[str, Any]) -> int:
    """Most recently learned first; learned before not learned."""
    a_learned = bool(a.get("learned"))
    b_learned = bool(b.get("learned"))
    if a_learned and b_learned:
        b_ts = b.get("learned_ts") or 0
        a_ts = a.get("learned_ts") or 0
        return (b_ts > a_ts) - (b_ts < a_ts)
    if a_learned and not b_learned:
        return -1
    if b_learned and not a_learned:
        return 1
    return 0


def sort_skills_by_learned(skills: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Return a new list of skills ordered by learned timestamp, newest first."""
    return sorted(skills, key=cmp_to_key(_compare_skills))


@dataclass(frozen=True)
class Profile:
    """Immutable snapshot of a fetched user profile.

    Attributes:
        payload: Raw JSON object as returned by the service
        language_codes: Keys of payload["language_data"] in payload order
    """

    payload: dict[str, Any]
    language_codes: tuple[str, ...] = field(default=())

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Profile:
        """Build a snapshot, fixing the language key order once."""
        language_data = payload.get("language_data") or {}
        return cls(payload=payload, language_codes=tuple(language_data.keys()))

    @property
    def ui_language(self) -> str | None:
        return self.payload.get("ui_language")

    @property
    def default_target_language(self) -> str | None:
        """First language in the per-language data, or None if there is none."""
        return self.language_codes[0] if self.language_codes else None

    def keys(self) -> list[str]:
        return list(self.payload.keys())

    def has_language(self, code: str) -> bool:
        return code in (self.payload.get("language_data") or {})

    def learning_languages(self, abbreviations: bool = False) -> list[str]:
        """Languages marked as learning, in payload order.

        Args:
            abbreviations: If True, return codes ("es") instead of names ("Spanish")

        Returns:
            List of codes or display names
        """
        key = "language" if abbreviations else "language_string"
        return [
            lang.get(key)
            for lang in self.payload.get("languages") or []
            if lang.get("learning")
        ]

    def summary(self) -> list[Any]:
        """Project SUMMARY_FIELDS in order. Missing fields become None."""
        return [self.payload.get(name) for name in SUMMARY_FIELDS]

    def summary_dict(self) -> dict[str, Any]:
        return dict(zip(SUMMARY_FIELDS, self.summary()))

    def skills(self, lang: str) -> list[dict[str, Any]]:
        """Raw skill list for a language.

        Raises:
            UnknownLanguageError: If lang is not a key of language_data
        """
        language_data = self.payload.get("language_data") or {}
        if lang not in language_data:
            raise UnknownLanguageError(lang, list(self.language_codes))
        return (language_data[lang] or {}).get("skills") or []

    def learned_skills(self, lang: str) -> list[dict[str, Any]]:
        """Learned skills, most recently learned first."""
        learned = [skill for skill in self.skills(lang) if skill.get("learned")]
        return sort_skills_by_learned(learned)

    def learned_words(self, lang: str) -> list[str]:
        """Words of every learned skill, skill order then word order."""
        words: list[str] = []
        for skill in self.skills(lang):
            if skill.get("learned"):
                words.extend(skill.get("words") or [])
        return words

    def known_topics(self, lang: str) -> list[str]:
        return [
            skill.get("title") for skill in self.skills(lang) if skill.get("learned")
        ]
