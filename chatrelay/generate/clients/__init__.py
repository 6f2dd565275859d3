# Provider clients. Each exposes `model`, async `generate(messages, params)`
# returning the raw provider payload, and async `aclose()`.

from .mock_client import MockClient
from .http_client import HttpClient
from .unconfigured_client import UnconfiguredClient

__all__ = ["MockClient", "HttpClient", "UnconfiguredClient"]
