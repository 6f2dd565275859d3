# Dummy model client for local dev and testing without API calls.

from typing import Any, Dict, List
from ..structured import build_mock_reply
from ..types import Message, ModelParams


class MockClient:
    def __init__(self):
        self.model = "mock"

    async def generate(self, messages: List[Message], params: ModelParams) -> Dict[str, Any]:
        return build_mock_reply(messages)

    async def aclose(self) -> None:
        return None
