"""Shared fixtures for Duolingo client tests.

No test touches the network: the requests.Session is a MagicMock whose
request() returns canned responses built with make_response().
"""

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from duolingo_client.config.app_config import ClientConfig


def make_response(
    json_data: Any = None,
    headers: dict[str, str] | None = None,
    status_code: int = 200,
    url: str = "https://www.duolingo.com/",
) -> MagicMock:
    """Build a fake requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.url = url
    response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


@pytest.fixture
def client_config() -> ClientConfig:
    """Default configuration, independent of configs/duolingo.yaml."""
    return ClientConfig()


@pytest.fixture
def mock_session() -> MagicMock:
    """Session double; set request.return_value or side_effect per test."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response({})
    return session


@pytest.fixture
def sample_profile() -> dict[str, Any]:
    """Profile payload shaped like GET /users/{username}."""
    return {
        "username": "ana",
        "bio": "Aprendiendo idiomas",
        "id": 42,
        "num_followers": 3,
        "num_following": 5,
        "cohort": 7,
        "learning_language_string": "Spanish",
        "created": "2 years ago",
        "contribution_points": 0,
        "admin": False,
        "invites_left": 3,
        "location": "Madrid",
        "fullname": "Ana García",
        "avatar": "https://example.com/ana.png",
        "ui_language": "en",
        "languages": [
            {"language": "es", "language_string": "Spanish", "learning": True},
            {"language": "de", "language_string": "German", "learning": False},
            {"language": "fr", "language_string": "French", "learning": True},
        ],
        "language_data": {
            "es": {
                "skills": [
                    {"title": "Basics 1", "learned": True, "learned_ts": 5, "words": ["a", "b"]},
                    {"title": "Food", "learned": False, "learned_ts": None, "words": ["x"]},
                    {"title": "Animals", "learned": True, "learned_ts": 10, "words": ["c"]},
                ]
            },
            "fr": {"skills": []},
        },
    }


@pytest.fixture
def sample_vocabulary() -> dict[str, Any]:
    """Vocabulary overview shaped like GET /vocabulary/overview."""
    return {
        "vocab_overview": [
            {
                "word_string": "casa",
                "normalized_string": "casa",
                "lexeme_id": "id1",
                "related_lexemes": ["id2"],
            },
            {
                "word_string": "casas",
                "normalized_string": "casas",
                "lexeme_id": "id2",
                "related_lexemes": ["id1"],
            },
            {
                "word_string": "perro",
                "normalized_string": "perro",
                "lexeme_id": "id3",
                "related_lexemes": [],
            },
        ]
    }


@pytest.fixture
def response_factory():
    """Expose make_response to tests."""
    return make_response
