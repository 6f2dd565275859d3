# Client for Google Gemini via the google-genai SDK.

from typing import Any, List, Optional

import httpx
from google import genai
from google.genai import errors as genai_errors

from ..errors import UpstreamError
from ..prompts import compose_prompt
from ..types import Message, ModelParams


class GoogleClient:
    def __init__(self, api_key: Optional[str], model: str = "gemini-2.5-flash"):
        if not api_key:
            raise ValueError("Gemini API key not found. Set LLM_API_KEY.")
        self.model = model
        self.client = genai.Client(api_key=api_key)

    async def generate(self, messages: List[Message], params: ModelParams) -> Any:
        try:
            return await self.client.aio.models.generate_content(
                model=params.model or self.model,
                contents=compose_prompt(params.instruction, messages),
                config={"max_output_tokens": params.max_tokens},
            )
        except genai_errors.APIError as e:
            body = e.details
            if isinstance(body, dict) and "error" in body:
                body = body["error"]
            detail = body or e.message or f"upstream returned HTTP {e.code}"
            raise UpstreamError(f"upstream returned HTTP {e.code}", detail=detail, status_code=e.code) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"upstream request failed: {type(e).__name__}") from e

    async def aclose(self) -> None:
        aclose = getattr(self.client.aio, "aclose", None)
        if aclose is not None:
            await aclose()
