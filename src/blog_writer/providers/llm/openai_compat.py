import logging
from typing import Any

from blog_writer.config import Settings
from blog_writer.providers.llm.base import LLMUnavailableError

logger = logging.getLogger(__name__)
ERROR_LOG_LIMIT = 1000


class OpenAICompatibleProvider:
    """Chat model behind an OpenAI-compatible endpoint (OpenAI, DeepSeek, local gateways)."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.model = settings.openai_model
        self._llm: Any | None = None

    async def complete(self, prompt: str) -> str:
        if not self.settings.openai_api_key:
            logger.info("openai.skipped reason=missing_api_key")
            raise LLMUnavailableError("missing_api_key")

        logger.info("openai.request model=%s prompt_chars=%d", self.model, len(prompt))
        try:
            response = await self._get_llm().ainvoke(prompt)
        except Exception as exc:
            detail = self._extract_error_detail(exc)
            logger.warning("openai.error model=%s type=%s detail=%s", self.model, exc.__class__.__name__, detail)
            raise LLMUnavailableError("provider_error", detail) from exc

        text = self._message_text(getattr(response, "content", response))
        logger.info("openai.response model=%s chars=%d", self.model, len(text))
        if not text:
            raise LLMUnavailableError("empty_reply")
        return text

    def _get_llm(self):
        if self._llm is None:
            from langchain_openai import ChatOpenAI

            self._llm = ChatOpenAI(
                model=self.model,
                api_key=self.settings.openai_api_key,
                base_url=self.settings.openai_base_url,
                timeout=self.settings.llm_timeout_seconds,
                max_tokens=self.settings.llm_max_tokens,
                max_retries=0,
            )
        return self._llm

    @staticmethod
    def _message_text(content: Any) -> str:
        if isinstance(content, str):
            return content.strip()
        if isinstance(content, list):
            parts: list[str] = []
            for item in content:
                if isinstance(item, dict) and "text" in item:
                    parts.append(str(item["text"]))
                else:
                    parts.append(str(item))
            return "\n".join(parts).strip()
        return str(content).strip()

    @staticmethod
    def _extract_error_detail(exc: Exception) -> str:
        status_code = getattr(exc, "status_code", None)
        message = getattr(exc, "message", None) or str(exc)
        details = [f"status_code={status_code}" if status_code is not None else "", f"message={message}"]
        text = " ".join(part for part in details if part).strip()
        if len(text) <= ERROR_LOG_LIMIT:
            return text
        return f"{text[:ERROR_LOG_LIMIT]}...(truncated)"
