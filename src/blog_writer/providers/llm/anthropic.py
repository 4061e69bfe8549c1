import json
import logging
from typing import Any

import httpx

from blog_writer.config import Settings
from blog_writer.providers.llm.base import LLMUnavailableError

logger = logging.getLogger(__name__)
PAYLOAD_LOG_LIMIT = 4000


class AnthropicProvider:
    """Anthropic Messages API client with compact request/response logs."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.model = settings.anthropic_model
        self.max_tokens = settings.llm_max_tokens
        self.messages_url = f"{settings.anthropic_base_url}/v1/messages"
        self.transport = transport

    async def complete(self, prompt: str) -> str:
        if not self.settings.anthropic_api_key:
            logger.info("anthropic.skipped reason=missing_api_key")
            raise LLMUnavailableError("missing_api_key")

        request_body = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.settings.anthropic_api_key,
            "anthropic-version": self.settings.anthropic_version,
        }
        logger.info(
            "anthropic.request model=%s max_tokens=%d prompt_chars=%d",
            self.model,
            self.max_tokens,
            len(prompt),
        )

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.llm_timeout_seconds,
                transport=self.transport,
            ) as client:
                http_response = await client.post(self.messages_url, json=request_body, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "anthropic.transport_error type=%s detail=%s",
                exc.__class__.__name__,
                self._clip(str(exc), PAYLOAD_LOG_LIMIT),
            )
            raise LLMUnavailableError("transport_error", str(exc)) from exc

        if not http_response.is_success:
            logger.warning(
                "anthropic.response status=%d body=%s",
                http_response.status_code,
                self._clip(http_response.text, PAYLOAD_LOG_LIMIT),
            )
            raise LLMUnavailableError(f"http_status_{http_response.status_code}")

        try:
            response = http_response.json()
        except ValueError as exc:
            raise LLMUnavailableError("empty_reply", "response body is not JSON") from exc

        text = self._reply_text(response)
        logger.info(
            "anthropic.response status=%d stop_reason=%s chars=%d",
            http_response.status_code,
            response.get("stop_reason") if isinstance(response, dict) else None,
            len(text),
        )
        logger.debug("anthropic.response.payload=%s", self._clip(self._to_json(response), PAYLOAD_LOG_LIMIT))
        if not text:
            raise LLMUnavailableError("empty_reply")
        return text

    @staticmethod
    def _reply_text(response: Any) -> str:
        if not isinstance(response, dict):
            return ""
        parts: list[str] = []
        for block in response.get("content") or []:
            if isinstance(block, dict) and block.get("type", "text") == "text":
                parts.append(str(block.get("text", "")))
        return "".join(parts).strip()

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    @staticmethod
    def _to_json(payload: Any) -> str:
        try:
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(payload)
