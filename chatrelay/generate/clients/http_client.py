# Client for a plain HTTP completion endpoint (bearer token, JSON body).

from __future__ import annotations
import logging
from typing import Any, List, Optional

import httpx

from ..errors import UpstreamError
from ..prompts import compose_prompt
from ..types import Message, ModelParams

logger = logging.getLogger(__name__)


def _error_field(resp: httpx.Response) -> Any:
    """Provider-supplied `error` field of a failed response, if any."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None


class HttpClient:
    def __init__(
        self,
        url: str,
        api_key: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.model = None
        headers = {"Content-Type": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self.client = httpx.AsyncClient(headers=headers, timeout=timeout, transport=transport)

    async def generate(self, messages: List[Message], params: ModelParams) -> Any:
        payload = {
            "prompt": compose_prompt(params.instruction, messages),
            "max_tokens": params.max_tokens,
        }
        try:
            resp = await self.client.post(self.url, json=payload)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            detail = _error_field(e.response) or f"upstream returned HTTP {status}"
            raise UpstreamError(f"upstream returned HTTP {status}", detail=detail, status_code=status) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"upstream request failed: {type(e).__name__}") from e

        logger.debug("Upstream answered %s (%d bytes)", resp.status_code, len(resp.content))
        try:
            return resp.json()
        except ValueError:
            return resp.text

    async def aclose(self) -> None:
        await self.client.aclose()
