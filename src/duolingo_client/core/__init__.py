"""Core query logic over Duolingo payloads.

Modules:
- profile: Profile snapshot, skill/word/topic/language queries
- vocabulary: Related-word lookup over the vocabulary overview
"""

from duolingo_client.core.profile import (
    Profile,
    ProfileNotLoadedError,
    SUMMARY_FIELDS,
    UnknownLanguageError,
)
from duolingo_client.core.vocabulary import find_related_words

__all__ = [
    "Profile",
    "ProfileNotLoadedError",
    "SUMMARY_FIELDS",
    "UnknownLanguageError",
    "find_related_words",
]
