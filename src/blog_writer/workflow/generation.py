import logging
from dataclasses import dataclass
from typing import Any, TypedDict

from langgraph.graph import END, START, StateGraph

from blog_writer.config import Settings, get_settings
from blog_writer.pipeline.fallback import generate_fallback_post
from blog_writer.pipeline.normalizer import normalize_reply
from blog_writer.pipeline.post import BlogPost
from blog_writer.prompts.builder import build_prompt, length_to_words
from blog_writer.providers.llm.base import LLMProvider, LLMUnavailableError, build_provider

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    post: BlogPost
    source: str
    fallback_reason: str | None = None


class WorkflowState(TypedDict):
    topic: str
    tone: str
    length: str
    keywords: list[str]
    word_count: int
    prompt: str
    reply: str
    fallback_reason: str | None
    post: BlogPost | None


class GenerationWorkflow:
    """Prompt -> draft -> normalize workflow with a local fallback branch.

    The compiled graph holds no per-request state.
    """

    def __init__(self, settings: Settings | None = None, provider: LLMProvider | None = None) -> None:
        self.settings = settings or get_settings()
        self.provider = provider or build_provider(self.settings)
        self._graph: Any | None = None

    async def run(self, topic: str, tone: str, length: str, keywords: list[str]) -> GenerationResult:
        logger.info("prompt")
        final_state = await self._get_graph().ainvoke(
            {
                "topic": topic,
                "tone": tone,
                "length": length,
                "keywords": list(keywords),
                "word_count": length_to_words(length),
                "prompt": "",
                "reply": "",
                "fallback_reason": None,
                "post": None,
            }
        )
        fallback_reason = final_state.get("fallback_reason")
        return GenerationResult(
            post=final_state["post"],
            source="fallback" if fallback_reason else "llm",
            fallback_reason=fallback_reason,
        )

    def _get_graph(self):
        if self._graph is None:
            self._graph = self._build_graph()
        return self._graph

    def _build_graph(self):
        graph = StateGraph(WorkflowState)
        graph.add_node("prompt_step", self._prompt_node)
        graph.add_node("draft_step", self._draft_node)
        graph.add_node("normalize_step", self._normalize_node)
        graph.add_node("fallback_step", self._fallback_node)
        graph.add_edge(START, "prompt_step")
        graph.add_edge("prompt_step", "draft_step")
        graph.add_conditional_edges(
            "draft_step",
            self._route_after_draft,
            {"normalize": "normalize_step", "fallback": "fallback_step"},
        )
        graph.add_edge("normalize_step", END)
        graph.add_edge("fallback_step", END)
        return graph.compile()

    async def _prompt_node(self, state: WorkflowState) -> dict[str, Any]:
        prompt = build_prompt(state["topic"], state["tone"], state["length"], state["keywords"])
        logger.debug("llm.request.full model=%s\n%s", self.provider.model, prompt)
        return {"prompt": prompt}

    async def _draft_node(self, state: WorkflowState) -> dict[str, Any]:
        logger.info("draft")
        try:
            reply = await self.provider.complete(state["prompt"])
        except LLMUnavailableError as exc:
            logger.info("llm.unavailable model=%s reason=%s", self.provider.model, exc.reason)
            return {"reply": "", "fallback_reason": exc.reason}
        logger.debug("llm.response.full model=%s\n%s", self.provider.model, reply)
        return {"reply": reply, "fallback_reason": None}

    @staticmethod
    def _route_after_draft(state: WorkflowState) -> str:
        return "fallback" if state.get("fallback_reason") else "normalize"

    async def _normalize_node(self, state: WorkflowState) -> dict[str, Any]:
        logger.info("normalize")
        return {"post": normalize_reply(state["reply"], state["topic"], state["keywords"])}

    async def _fallback_node(self, state: WorkflowState) -> dict[str, Any]:
        logger.info("fallback")
        post = generate_fallback_post(state["topic"], state["tone"], state["word_count"], state["keywords"])
        return {"post": post}
