# Generator package

# Makes generate/ importable and exposes key interfaces.

from .errors import ConfigurationError, RelayError, UpstreamError
from .factory import build_client
from .generator import ChatGenerator, decode_reply
from .normalize import normalize
from .streaming import ERROR_MARKER, iter_chunks, stream_reply
from .structured import structured_to_markdown, try_parse_structured
from .types import GenerationResult, Message, ModelParams
from .clients.mock_client import MockClient

__all__ = [
    "ChatGenerator",
    "ConfigurationError",
    "ERROR_MARKER",
    "GenerationResult",
    "Message",
    "MockClient",
    "ModelParams",
    "RelayError",
    "UpstreamError",
    "build_client",
    "decode_reply",
    "iter_chunks",
    "normalize",
    "stream_reply",
    "structured_to_markdown",
    "try_parse_structured",
]
