import json
import logging
import re
from typing import Any

from blog_writer.pipeline.fallback import derive_keywords
from blog_writer.pipeline.outline import extract_outline
from blog_writer.pipeline.post import BlogPost

logger = logging.getLogger(__name__)

JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")
TITLE_MARKER_PATTERN = re.compile(r"^#+\s*")


def normalize_reply(text: str, topic: str, keywords: list[str]) -> BlogPost:
    """Turn a model reply into a ``BlogPost``.

    Tries, in order: the first brace-delimited JSON object in the reply, a
    "first line is the title" split when that JSON is unparseable, and finally
    the raw reply as content under a synthesized title.
    """
    match = JSON_OBJECT_PATTERN.search(text)
    if match is None:
        logger.info("normalize.raw_reply chars=%d", len(text))
        return _wrap_raw(text, topic, keywords)

    parsed = _parse_json_object(match.group(0))
    if parsed is not None:
        logger.info("normalize.json keys=%s", ",".join(sorted(parsed.keys())))
        return _from_json(parsed, text, topic, keywords)

    logger.info("normalize.first_line_title chars=%d", len(text))
    return _split_title(text, topic, keywords)


def _parse_json_object(candidate: str) -> dict[str, Any] | None:
    try:
        # models often emit raw newlines inside string values
        parsed = json.loads(candidate, strict=False)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def _from_json(parsed: dict[str, Any], text: str, topic: str, keywords: list[str]) -> BlogPost:
    title = _as_text(parsed.get("title")) or f"{topic}: A Comprehensive Guide"
    content = _as_text(parsed.get("content")) or text.strip()
    reply_keywords = _as_text_list(parsed.get("keywords"))
    outline = _as_text_list(parsed.get("outline"))
    return BlogPost(
        title=title,
        content=content,
        keywords=reply_keywords or _request_keywords(topic, keywords),
        outline=outline or extract_outline(content),
    )


def _split_title(text: str, topic: str, keywords: list[str]) -> BlogPost:
    lines = text.split("\n")
    title = TITLE_MARKER_PATTERN.sub("", lines[0]).strip() or f"{topic}: Insights and Analysis"
    content = "\n".join(lines[1:]).strip()
    return BlogPost(
        title=title,
        content=content,
        keywords=_request_keywords(topic, keywords),
        outline=extract_outline(content),
    )


def _wrap_raw(text: str, topic: str, keywords: list[str]) -> BlogPost:
    return BlogPost(
        title=f"{topic}: A Comprehensive Guide",
        content=text,
        keywords=_request_keywords(topic, keywords),
        outline=extract_outline(text),
    )


def _request_keywords(topic: str, keywords: list[str]) -> list[str]:
    return list(keywords) if keywords else derive_keywords(topic)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _as_text_list(value: Any) -> list[str]:
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, list):
        return []
    return [text for text in (_as_text(item) for item in value) if text]
