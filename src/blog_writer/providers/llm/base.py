from typing import Protocol

from blog_writer.config import Settings


class LLMUnavailableError(Exception):
    """Raised when the model cannot produce a reply; callers switch to fallback content."""

    def __init__(self, reason: str, detail: str = "") -> None:
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


class LLMProvider(Protocol):
    model: str

    async def complete(self, prompt: str) -> str: ...


def build_provider(settings: Settings) -> LLMProvider:
    if settings.llm_provider == "openai":
        from blog_writer.providers.llm.openai_compat import OpenAICompatibleProvider

        return OpenAICompatibleProvider(settings)

    from blog_writer.providers.llm.anthropic import AnthropicProvider

    return AnthropicProvider(settings)
