"""
HTTP client used to submit completed hunts.
"""
from typing import Any, Dict, Optional

import httpx

from ..models.submission import TransportResult


class SubmissionClient:
    """Posts JSON bodies and reports whether a response came back.

    A single request is made per call; there is no retry.
    """

    def __init__(self, timeout: float = 5.0, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = timeout
        self._transport = transport
        self.request_count = 0

    async def post_json(self, url: str, payload: Dict[str, Any]) -> TransportResult:
        """POST ``payload`` as JSON to ``url``."""
        self.request_count += 1
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.post(
                    url,
                    json=payload,
                    headers={"Content-Type": "application/json"}
                )
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                return TransportResult(ok=False, error=str(e) or e.__class__.__name__)

        return TransportResult(
            ok=True,
            status_code=response.status_code,
            reason=response.reason_phrase
        )
