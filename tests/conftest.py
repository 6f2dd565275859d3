# Shared fixtures: settings that ignore the developer's .env, and fakes.

import pytest

from chatrelay.generate import GenerationResult
from chatrelay.settings import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "LLM_PROVIDER": None,
        "LLM_API_KEY": None,
        "LLM_API_URL": None,
        "LLM_MODEL": None,
        "STREAM_DELAY_MS": 0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeGenerator:
    """Stands in for ChatGenerator: returns a fixed text or raises."""

    engine = "FakeGenerator"

    def __init__(self, text="", raw=None, error=None):
        self.text = text
        self.raw = raw
        self.error = error
        self.calls = []
        self.closed = False

    async def generate(self, messages):
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return GenerationResult(text=self.text, raw=self.raw)

    async def aclose(self):
        self.closed = True


@pytest.fixture
def settings():
    return make_settings()
