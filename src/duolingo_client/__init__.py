"""Client for the Duolingo account and dictionary endpoints."""

from duolingo_client.api.client import (
    DuolingoAccount,
    DuolingoError,
    DuolingoTransportError,
    ProfileNotLoadedError,
    UnknownLanguageError,
)

__version__ = "0.1.0"

__all__ = [
    "DuolingoAccount",
    "DuolingoError",
    "DuolingoTransportError",
    "ProfileNotLoadedError",
    "UnknownLanguageError",
]
