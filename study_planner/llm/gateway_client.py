"""HTTP client for the OpenAI-compatible AI gateway."""

from __future__ import annotations

import logging
from typing import Any

import requests

from study_planner.config import Settings

logger = logging.getLogger("uvicorn.error")


class GatewayError(Exception):
    """Base class for gateway call failures."""


class GatewayTransportError(GatewayError):
    """The request never produced an HTTP response (DNS, refused, timeout)."""


class GatewayStatusError(GatewayError):
    """The gateway answered with a non-2xx status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"AI service error: {status_code}")
        self.status_code = status_code
        self.body = body


class GatewayClient:
    """Single-shot chat completion calls with a forced tool invocation."""

    def __init__(self, api_key: str, url: str, model: str, timeout: float, session=None):
        self._api_key = api_key
        self._url = url
        self._model = model
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, config: Settings, session=None) -> "GatewayClient":
        return cls(
            api_key=config.require_gateway_key(),
            url=config.gateway_url,
            model=config.gateway_model,
            timeout=config.gateway_timeout_seconds,
            session=session,
        )

    def build_payload(
        self,
        messages: list[dict[str, str]],
        tools: list[dict[str, Any]],
        tool_choice: dict[str, Any],
    ) -> dict[str, Any]:
        return {
            "model": self._model,
            "messages": messages,
            "tools": tools,
            "tool_choice": tool_choice,
        }

    def complete(
        self,
        messages: list[dict[str, str]],
        tools: list[dict[str, Any]],
        tool_choice: dict[str, Any],
    ) -> dict[str, Any]:
        """POST one completion request and return the decoded JSON body.

        Raises
        ------
        GatewayTransportError
            When no response was received.
        GatewayStatusError
            When the gateway returned a non-2xx status.
        """
        payload = self.build_payload(messages, tools, tool_choice)
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        try:
            resp = self._session.post(self._url, json=payload, headers=headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise GatewayTransportError(str(exc)) from exc

        if not 200 <= resp.status_code < 300:
            raise GatewayStatusError(resp.status_code, resp.text)

        try:
            return resp.json()
        except ValueError as exc:
            raise GatewayError("AI gateway returned a non-JSON body") from exc
