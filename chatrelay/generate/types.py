# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Optional

from .prompts import JSON_INSTRUCTION


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str
    time: Optional[str] = None


@dataclass
class ModelParams:
    """LLM parameters per request."""
    max_tokens: int = 512
    instruction: str = field(default=JSON_INSTRUCTION)
    model: Optional[str] = None


@dataclass
class GenerationResult:
    """Canonical reply text plus the unprocessed provider payload."""
    text: str
    raw: Any = None
