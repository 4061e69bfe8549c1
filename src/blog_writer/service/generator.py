import logging

from blog_writer.workflow.generation import GenerationWorkflow

logger = logging.getLogger(__name__)
TOPIC_LOG_CHARS = 80


class GenerationError(Exception):
    """Generation failed for a reason other than the model being unavailable."""


class GenerateService:
    def __init__(self, workflow: GenerationWorkflow | None = None) -> None:
        self._workflow = workflow

    @property
    def workflow(self) -> GenerationWorkflow:
        if self._workflow is None:
            self._workflow = GenerationWorkflow()
        return self._workflow

    async def generate(
        self,
        topic: str,
        tone: str = "professional",
        length: str = "medium",
        keywords: list[str] | None = None,
    ) -> dict:
        keywords = list(keywords or [])
        try:
            output = await self.workflow.run(topic, tone, length, keywords)
        except Exception as exc:
            logger.exception("generate.failed topic=%s", self._clip(topic, TOPIC_LOG_CHARS))
            raise GenerationError(str(exc)) from exc

        post = output.post
        logger.info(
            "generate.done topic=%s tone=%s length=%s source=%s fallback_reason=%s chars=%d sections=%d",
            self._clip(topic, TOPIC_LOG_CHARS),
            tone,
            length,
            output.source,
            output.fallback_reason,
            len(post.content),
            len(post.outline),
        )
        return post.as_dict()

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"
