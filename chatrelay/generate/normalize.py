"""
Response normalization.

Providers answer in different shapes: plain text, `{"reply": ...}` bodies,
OpenAI-style `choices`, Gemini-style `candidates`, or SDK response objects.
`normalize` runs an ordered list of extractors and returns the first
non-empty string; the last resort is the JSON form of the whole payload.
Adding a new provider shape means adding one extractor to `EXTRACTORS`.
"""

from __future__ import annotations
import json
from typing import Any, Callable, Optional, Tuple

_MISSING = object()


def _get(obj: Any, key: Any) -> Any:
    """Index a dict, list or object without raising; None when absent."""
    if obj is None:
        return None
    try:
        if isinstance(key, int):
            if isinstance(obj, (list, tuple)) and -len(obj) <= key < len(obj):
                return obj[key]
            return None
        if isinstance(obj, dict):
            return obj.get(key)
        value = getattr(obj, key, _MISSING)
    except Exception:
        return None
    return None if value is _MISSING else value


def _path(obj: Any, *keys: Any) -> Any:
    for key in keys:
        obj = _get(obj, key)
        if obj is None:
            return None
    return obj


def _to_jsonable(obj: Any) -> Any:
    dump = getattr(obj, "model_dump", None)
    if callable(dump):
        return dump(mode="json", exclude_none=True)
    return str(obj)


def to_json(raw: Any) -> str:
    """JSON-stringify anything, SDK objects included."""
    return json.dumps(raw, default=_to_jsonable, ensure_ascii=False)


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value or None
    parts = _get(value, "parts")
    if isinstance(parts, (list, tuple)):
        texts = [t for t in (_get(p, "text") for p in parts) if isinstance(t, str)]
        if texts:
            return "".join(texts) or None
    try:
        return to_json(value)
    except Exception:
        return None


# --- extractors, tried in order ---

def from_plain_string(raw: Any) -> Optional[str]:
    if isinstance(raw, str) and raw:
        return raw
    return None


def from_reply_field(raw: Any) -> Optional[str]:
    reply = _get(raw, "reply")
    if reply is None or isinstance(reply, str):
        return reply or None
    return to_json(reply)


def from_raw_text(raw: Any) -> Optional[str]:
    if isinstance(raw, str):
        return None
    text = _get(raw, "text")
    if isinstance(text, str) and text:
        return text
    nested = _path(raw, "raw", "text")
    if isinstance(nested, str) and nested:
        return nested
    return None


def from_choices(raw: Any) -> Optional[str]:
    first = _path(raw, "choices", 0)
    if first is None:
        return None
    return _as_text(_path(first, "message", "content")) or _as_text(_get(first, "text"))


def from_output(raw: Any) -> Optional[str]:
    first = _path(raw, "output", 0)
    if first is None:
        return None
    if isinstance(first, str):
        return first or None
    return _as_text(_get(first, "content")) or _as_text(
        _path(first, "candidates", 0, "content")
    )


EXTRACTORS: Tuple[Callable[[Any], Optional[str]], ...] = (
    from_plain_string,
    from_reply_field,
    from_raw_text,
    from_choices,
    from_output,
)


def normalize(raw: Any) -> str:
    """Best-effort canonical reply text for any provider payload."""
    for extract in EXTRACTORS:
        try:
            text = extract(raw)
        except Exception:
            text = None
        if text:
            return text
    try:
        return to_json(raw)
    except Exception:
        return repr(raw)
