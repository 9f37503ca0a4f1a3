import pytest
import responses

from scrobblez.config import Settings
from scrobblez.lastfm import LastFmClient

API_URL = "https://api.example.test/2.0/"
AUTH_URL = "https://www.example.test/api/auth/"


@pytest.fixture
def settings():
    return Settings(
        lastfm_api_key="test-key",
        lastfm_shared_secret="test-secret",
        api_url=API_URL,
        auth_url=AUTH_URL,
        open_browser=False,
    )


@pytest.fixture
def client(settings):
    return LastFmClient.from_settings(settings)


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


class ScriptedInput:
    """Stand-in for ``input`` that replays answers, then raises EOFError."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: list[str] = []

    def __call__(self, question: str) -> str:
        self.questions.append(question)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)
