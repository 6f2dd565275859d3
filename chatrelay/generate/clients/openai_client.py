# Client for the OpenAI Chat Completions API.

from typing import Any, List, Optional

import httpx
import openai
from openai import AsyncOpenAI

from ..errors import UpstreamError
from ..prompts import compose_prompt
from ..types import Message, ModelParams


class OpenAIClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str = "gpt-4o-mini",
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.model = model
        # one upstream call per request
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0, http_client=http_client)

    async def generate(self, messages: List[Message], params: ModelParams) -> Any:
        try:
            return await self.client.chat.completions.create(
                model=params.model or self.model,
                messages=[{"role": "user", "content": compose_prompt(params.instruction, messages)}],
                max_tokens=params.max_tokens,
            )
        except openai.APIStatusError as e:
            body = e.body
            if isinstance(body, dict) and "error" in body:
                body = body["error"]
            detail = body or f"upstream returned HTTP {e.status_code}"
            raise UpstreamError(f"upstream returned HTTP {e.status_code}", detail=detail, status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            raise UpstreamError(f"upstream request failed: {type(e).__name__}") from e

    async def aclose(self) -> None:
        await self.client.close()
