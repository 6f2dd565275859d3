"""
Provider selection.

`build_client(settings)` is called once at startup and returns the single
client every request will use. First matching rule wins:

1. nothing configured (no LLM_PROVIDER, no LLM_API_URL): MockClient
2. LLM_PROVIDER names an SDK and its client constructs: that client
3. LLM_API_URL set: HttpClient
4. otherwise: UnconfiguredClient, which fails each request
"""

from __future__ import annotations
import logging

from chatrelay.settings import Settings
from .clients import HttpClient, MockClient, UnconfiguredClient

logger = logging.getLogger(__name__)

DEFAULT_MODELS = {
    "google": "gemini-2.5-flash",
    "openai": "gpt-4o-mini",
}

ALIASES = {"gemini": "google"}


def _build_sdk_client(provider: str, settings: Settings):
    model = settings.LLM_MODEL or DEFAULT_MODELS[provider]
    if provider == "google":
        from .clients.google_client import GoogleClient
        return GoogleClient(api_key=settings.LLM_API_KEY, model=model)
    from .clients.openai_client import OpenAIClient
    return OpenAIClient(api_key=settings.LLM_API_KEY, model=model)


def build_client(settings: Settings):
    provider = (settings.LLM_PROVIDER or "").strip().lower()
    provider = ALIASES.get(provider, provider)

    if not provider and not settings.LLM_API_URL:
        logger.warning("No LLM provider configured; using the mock provider")
        return MockClient()

    if provider in DEFAULT_MODELS:
        try:
            return _build_sdk_client(provider, settings)
        except Exception as e:
            logger.warning("Could not initialize %s client (%s); falling back to HTTP", provider, e)

    if settings.LLM_API_URL:
        if not settings.LLM_API_KEY:
            logger.warning("LLM_API_KEY not set; calling %s without a bearer token", settings.LLM_API_URL)
        return HttpClient(
            url=settings.LLM_API_URL,
            api_key=settings.LLM_API_KEY,
            timeout=settings.REQUEST_TIMEOUT,
        )

    logger.warning("LLM_API_URL not set and no SDK client available")
    return UnconfiguredClient("no endpoint configured")
