DEFAULT_WORD_COUNT = 1000
LENGTH_WORDS = {
    "short": 500,
    "medium": 1000,
    "long": 1500,
}

PROMPT_TEMPLATE = """You are an expert blog writer. Write a complete, engaging blog post with the following specifications:

- Topic: {topic}
- Tone: {tone}
- Target length: approximately {word_count} words{keyword_text}

Requirements:
1. Create a compelling title
2. Write a complete blog post with introduction, body paragraphs, and conclusion
3. Use the specified tone consistently
4. Make it informative, well-structured, and engaging
5. Include relevant examples or insights
6. Use proper paragraph breaks for readability

Format your response as a JSON object with this structure:
{{
  "title": "The blog post title",
  "content": "The full blog post content with proper paragraph breaks",
  "keywords": ["keyword1", "keyword2", "keyword3"],
  "outline": ["Section 1", "Section 2", "Section 3"]
}}

Write the complete blog post now:"""


def length_to_words(length: str | None) -> int:
    return LENGTH_WORDS.get((length or "").strip().lower(), DEFAULT_WORD_COUNT)


def keyword_clause(keywords: list[str]) -> str:
    if not keywords:
        return ""
    return f"\n- Focus on these keywords: {', '.join(keywords)}"


def build_prompt(topic: str, tone: str, length: str | None, keywords: list[str]) -> str:
    """Render the instruction prompt sent to the model.

    The reply is requested as a JSON object so the normalizer can usually take
    the fast path; free-text replies are still handled downstream.
    """
    return PROMPT_TEMPLATE.format(
        topic=topic,
        tone=tone,
        word_count=length_to_words(length),
        keyword_text=keyword_clause(keywords),
    )
