"""Base error for the Duolingo client."""


class DuolingoError(Exception):
    """Error during interaction with Duolingo data or endpoints."""

    pass
