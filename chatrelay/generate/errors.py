# Error types raised by the generator layer.

from __future__ import annotations
from typing import Any, Optional


class RelayError(Exception):
    """Base class for generator failures."""


class ConfigurationError(RelayError):
    """No usable provider is reachable with the current settings."""


class UpstreamError(RelayError):
    """The provider call failed: network error, timeout or non-2xx reply.

    `detail` is safe to show to a client: the provider's own error field
    when it sent one, otherwise a short summary. It never carries the
    request headers or a traceback.
    """

    def __init__(self, message: str, detail: Any = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.detail = detail if detail is not None else message
        self.status_code = status_code
