# Stand-in used when a provider was requested but none could be set up.

from typing import Any, List
from ..errors import ConfigurationError
from ..types import Message, ModelParams


class UnconfiguredClient:
    def __init__(self, reason: str = "no endpoint configured"):
        self.model = None
        self.reason = reason

    async def generate(self, messages: List[Message], params: ModelParams) -> Any:
        raise ConfigurationError(self.reason)

    async def aclose(self) -> None:
        return None
