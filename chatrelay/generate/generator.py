# ChatGenerator: the provider adapter.
# - accepts any model client (mock, HTTP, Google, OpenAI)
# - makes exactly one upstream call per request
# - turns the raw payload into a GenerationResult

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, List, Optional

import yaml

from .normalize import normalize, to_json
from .prompts import JSON_INSTRUCTION
from .structured import structured_to_markdown, try_parse_structured
from .types import GenerationResult, Message, ModelParams

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")


def decode_reply(raw: Any) -> GenerationResult:
    """Prefer a rendered structured reply; fall back to normalized text."""
    text = normalize(raw)
    candidates = [text]
    if not isinstance(raw, str):
        try:
            candidates.append(to_json(raw))
        except Exception:
            pass
    for candidate in candidates:
        parsed = try_parse_structured(candidate)
        if parsed is not None:
            return GenerationResult(text=structured_to_markdown(parsed), raw=parsed)
    return GenerationResult(text=text, raw=raw)


class ChatGenerator:
    def __init__(self, model_client, config_path: Optional[str] = None, model: Optional[str] = None):
        self.model_client = model_client
        self.config_path = config_path or str(DEFAULT_CONFIG_PATH)
        self.cfg = self._load_config()
        self.model = model

    def _load_config(self):
        if not os.path.exists(self.config_path):
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @property
    def engine(self) -> str:
        return type(self.model_client).__name__

    def _params(self) -> ModelParams:
        return ModelParams(
            max_tokens=int(self.cfg.get("max_tokens") or 512),
            instruction=self.cfg.get("instruction") or JSON_INSTRUCTION,
            model=self.model,
        )

    async def generate(self, messages: List[Message]) -> GenerationResult:
        """Main entry point for generation."""
        if not messages:
            raise ValueError("conversation must contain at least one message")
        raw = await self.model_client.generate(messages, self._params())
        result = decode_reply(raw)
        logger.info("%s replied with %d chars", self.engine, len(result.text))
        return result

    async def aclose(self) -> None:
        await self.model_client.aclose()
