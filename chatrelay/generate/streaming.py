"""
Simulated streaming.

The provider is called once and the complete reply is generated before any
byte reaches the client. The text is then re-chunked and drip-fed with a
short pause between writes so the browser can render it as if it were
being typed. This is not token-level streaming from the provider.
"""

from __future__ import annotations
import asyncio
import logging
import re
from typing import AsyncIterator, Iterator, List

from .types import Message

logger = logging.getLogger(__name__)

ERROR_MARKER = "\n[error]\n"

_WHITESPACE = re.compile(r"(\s+)")


def split_tokens(text: str) -> List[str]:
    """Split into words and whitespace runs; joining them gives `text` back."""
    return [t for t in _WHITESPACE.split(text) if t]


def iter_chunks(text: str, limit: int = 60) -> Iterator[str]:
    buffer = ""
    for token in split_tokens(text):
        buffer += token
        if len(buffer) > limit or token.isspace():
            yield buffer
            buffer = ""
    if buffer:
        yield buffer


async def stream_reply(
    generator,
    messages: List[Message],
    chunk_chars: int = 60,
    delay: float = 0.06,
) -> AsyncIterator[str]:
    """Yield the reply in paced chunks, or the error marker on failure.

    A client disconnect cancels this coroutine at one of its awaits, which
    ends the loop; cancellation is not caught here.
    """
    try:
        result = await generator.generate(messages)
        text = result.text if result and result.text else ""
        if not text:
            return
        sent = 0
        for chunk in iter_chunks(str(text), chunk_chars):
            yield chunk
            sent += 1
            await asyncio.sleep(delay)
        logger.info("Streamed %d chars in %d chunks", len(text), sent)
    except Exception:
        logger.exception("Stream generation failed")
        yield ERROR_MARKER
