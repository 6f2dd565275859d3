# Prompt fragments sent to SDK and HTTP providers.

from __future__ import annotations
from typing import Iterable

JSON_INSTRUCTION = """\
Respond ONLY with a single JSON object and no other text.
Use exactly this shape:
{
  "title": "short title",
  "summary": "one or two sentence answer",
  "sections": [{"heading": "...", "content": "markdown text"}],
  "examples": [{"input": "...", "output": "..."}],
  "notes": "optional caveats or null"
}
"sections" is required; use an empty list for "examples" when none apply.
"""


def compose_conversation(messages: Iterable) -> str:
    """Render turns as `role: content` pairs separated by blank lines."""
    return "\n\n".join(f"{m.role}: {m.content}" for m in messages)


def compose_prompt(instruction: str, messages: Iterable) -> str:
    return f"{instruction.strip()}\n\n{compose_conversation(messages)}"
