# ===============================================
# tests/test_factory.py
# Provider selection at startup.
# ===============================================
import asyncio
import logging

from chatrelay.generate import factory
from chatrelay.generate.clients import HttpClient, MockClient, UnconfiguredClient
from chatrelay.generate.errors import ConfigurationError
from chatrelay.generate.types import Message, ModelParams

from .conftest import make_settings


def test_nothing_configured_uses_mock():
    assert isinstance(factory.build_client(make_settings()), MockClient)


def test_url_only_uses_http():
    client = factory.build_client(make_settings(LLM_API_URL="http://llm.test/v1", LLM_API_KEY="k"))
    assert isinstance(client, HttpClient)
    assert client.url == "http://llm.test/v1"
    asyncio.run(client.aclose())


def test_sdk_failure_falls_back_to_http(monkeypatch, caplog):
    def boom(provider, settings):
        raise RuntimeError("sdk missing")

    monkeypatch.setattr(factory, "_build_sdk_client", boom)
    with caplog.at_level(logging.WARNING):
        client = factory.build_client(make_settings(LLM_PROVIDER="google", LLM_API_URL="http://llm.test"))
    assert isinstance(client, HttpClient)
    assert "falling back to HTTP" in caplog.text
    asyncio.run(client.aclose())


def test_sdk_failure_without_url_fails_per_request(monkeypatch):
    def boom(provider, settings):
        raise RuntimeError("sdk missing")

    monkeypatch.setattr(factory, "_build_sdk_client", boom)
    client = factory.build_client(make_settings(LLM_PROVIDER="openai"))
    assert isinstance(client, UnconfiguredClient)

    async def call():
        await client.generate([Message(role="user", content="hi")], ModelParams())

    try:
        asyncio.run(call())
    except ConfigurationError as e:
        assert "no endpoint configured" in str(e)
    else:
        raise AssertionError("expected ConfigurationError")


def test_unknown_provider_without_url_is_unconfigured():
    assert isinstance(factory.build_client(make_settings(LLM_PROVIDER="other")), UnconfiguredClient)


def test_gemini_is_an_alias_for_google(monkeypatch):
    seen = {}

    def fake(provider, settings):
        seen["provider"] = provider
        return MockClient()

    monkeypatch.setattr(factory, "_build_sdk_client", fake)
    factory.build_client(make_settings(LLM_PROVIDER="Gemini"))
    assert seen["provider"] == "google"


def test_google_without_key_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        client = factory.build_client(make_settings(LLM_PROVIDER="google", LLM_API_URL="http://llm.test"))
    assert isinstance(client, HttpClient)
    asyncio.run(client.aclose())


def test_openai_client_is_built_with_key():
    from chatrelay.generate.clients.openai_client import OpenAIClient

    client = factory.build_client(make_settings(LLM_PROVIDER="openai", LLM_API_KEY="sk-test"))
    assert isinstance(client, OpenAIClient)
    assert client.model == "gpt-4o-mini"
    asyncio.run(client.aclose())
