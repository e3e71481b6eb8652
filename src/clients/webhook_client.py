from __future__ import annotations

from typing import Any, Mapping

import httpx

from core.errors import ExternalServiceError, ValidationError


class WebhookClient:
    def __init__(self, *, timeout: float, verify: bool = True) -> None:
        self._timeout = timeout
        self._verify = verify

    async def post_json(self, url: str, payload: Mapping[str, Any]) -> Any:
        target = (url or "").strip()
        if not target:
            raise ValidationError("Webhook URL is empty")

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                verify=self._verify,
                follow_redirects=True,
            ) as c:
                r = await c.post(
                    target,
                    json=dict(payload),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.HTTPError as e:
            raise ExternalServiceError(f"Failed to call webhook: {e}") from e

        if not r.is_success:
            raise ExternalServiceError(f"HTTP {r.status_code}: {r.reason_phrase}")

        try:
            return r.json()
        except ValueError as e:
            raise ExternalServiceError(f"Webhook returned a non-JSON reply: {e}") from e
