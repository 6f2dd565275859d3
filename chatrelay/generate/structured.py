"""
Structured replies.

Providers are asked to answer with a JSON object (see prompts.py). Models
often wrap it in prose or a ```json fence, so the decoder slices from the
first `{` to the last `}` before parsing. A reply that does not decode is
not an error: callers fall back to the plain text.
"""

from __future__ import annotations
import json
from typing import Any, Dict, List, Optional

from .types import Message

CONFIG_HINT = (
    "No LLM provider is configured. Set LLM_PROVIDER (google or openai) "
    "with LLM_API_KEY, or LLM_API_URL, in .env to get real answers."
)


def try_parse_structured(text: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(text, str):
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(text[start:end + 1])
    except ValueError:
        return None
    if not isinstance(parsed, dict) or not isinstance(parsed.get("sections"), list):
        return None
    return parsed


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _fenced(label: str, body: Any) -> str:
    return f"**{label}**\n```\n{'' if body is None else body}\n```"


def structured_to_markdown(obj: Dict[str, Any]) -> str:
    """Render a structured reply as Markdown, omitting absent fields."""
    blocks: List[str] = []
    if obj.get("title"):
        blocks.append(f"# {obj['title']}")
    if obj.get("summary"):
        blocks.append(str(obj["summary"]))

    for section in _as_list(obj.get("sections")):
        if not isinstance(section, dict):
            blocks.append(str(section))
            continue
        heading = section.get("heading")
        content = section.get("content")
        lines = []
        if heading:
            lines.append(f"## {heading}")
        if content:
            lines.append(str(content))
        if lines:
            blocks.append("\n".join(lines))

    examples = [e for e in _as_list(obj.get("examples")) if isinstance(e, dict)]
    if examples:
        blocks.append("## Examples")
        for ex in examples:
            blocks.append(_fenced("Input", ex.get("input")) + "\n\n" + _fenced("Output", ex.get("output")))

    if obj.get("notes"):
        blocks.append(f"> {obj['notes']}")

    return "\n\n".join(blocks).strip()


def build_mock_reply(messages: List[Message]) -> Dict[str, Any]:
    """Deterministic StructuredReply echoing the last user message."""
    user_inputs = [m.content for m in messages if m.role == "user"]
    last = user_inputs[-1] if user_inputs else "(no user input)"
    return {
        "title": "Mock reply",
        "summary": f"You said: {last}",
        "sections": [
            {
                "heading": "What happened",
                "content": "This answer was produced locally by the mock provider. No request left the server.",
            },
            {
                "heading": "Conversation",
                "content": f"{len(messages)} message(s) received; replying to the latest user turn.",
            },
        ],
        "examples": [{"input": last, "output": f"You said: {last}"}],
        "notes": CONFIG_HINT,
    }
