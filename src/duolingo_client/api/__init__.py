"""Duolingo API client package."""

from duolingo_client.api.client import (
    DuolingoAccount,
    DuolingoError,
    DuolingoTransportError,
    ProfileNotLoadedError,
    UnknownLanguageError,
)

__all__ = [
    "DuolingoAccount",
    "DuolingoError",
    "DuolingoTransportError",
    "ProfileNotLoadedError",
    "UnknownLanguageError",
]
