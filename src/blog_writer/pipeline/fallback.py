from blog_writer.pipeline.post import BlogPost

TONE_ADJECTIVES = {
    "professional": "comprehensive",
    "casual": "friendly",
    "formal": "thorough",
    "humorous": "entertaining",
}
DEFAULT_TONE_ADJECTIVE = "engaging"
RELATED_TERMS = ("trends", "innovation", "future")
MAX_DERIVED_KEYWORDS = 5

FALLBACK_OUTLINE = (
    "Introduction",
    "Key Concepts and Background",
    "Current Trends and Developments",
    "Practical Applications",
    "Future Outlook",
    "Conclusion",
)

FALLBACK_TEMPLATE = """Welcome to this {adjective} exploration of {topic}{keyword_text}. In today's rapidly evolving landscape, understanding this subject has become increasingly important for professionals and enthusiasts alike.

## Understanding the Fundamentals

{topic} represents a fascinating area of study and practice. At its core, it encompasses several key principles that form the foundation of our understanding. These principles have evolved over time, shaped by technological advances, cultural shifts, and innovative thinking from experts around the world.

The significance of {topic} cannot be overstated. It affects various aspects of our daily lives, from how we work to how we interact with the world around us. By examining this topic closely, we gain valuable insights that can inform our decisions and strategies moving forward.

## Current Landscape and Trends

The current state of {topic} is characterized by rapid innovation and transformation. Industry leaders and researchers are constantly pushing boundaries, exploring new possibilities, and challenging conventional wisdom. This dynamic environment creates both opportunities and challenges for those involved in the field.

Several emerging trends are worth noting:

**Innovation and Technology**: New technologies are reshaping how we approach {topic}, offering tools and capabilities that were unimaginable just a few years ago.

**Changing Perspectives**: Our understanding of {topic} continues to evolve as we gather more data, conduct more research, and learn from real-world applications.

**Global Impact**: The influence of {topic} extends across borders, affecting communities and industries worldwide in profound ways.

## Practical Applications and Real-World Impact

Understanding {topic} from a theoretical perspective is valuable, but seeing how it applies in practice brings the subject to life. Across various industries and sectors, professionals are leveraging insights about {topic} to drive innovation, solve problems, and create value.

Consider the ways organizations are implementing strategies related to {topic}. Many have discovered that success requires a combination of technical expertise, strategic thinking, and adaptability. The most effective approaches often involve:

- Careful planning and analysis
- Collaboration across teams and disciplines
- Continuous learning and improvement
- Attention to both immediate needs and long-term goals

## Challenges and Considerations

No discussion of {topic} would be complete without acknowledging the challenges involved. Like any complex subject, it presents obstacles that require careful navigation. Some of the most common challenges include:

**Complexity**: The multifaceted nature of {topic} can be overwhelming, particularly for those new to the field.

**Resource Constraints**: Implementing best practices related to {topic} often requires investment in time, money, and expertise.

**Changing Environment**: The rapid pace of change means that what works today may need adjustment tomorrow.

Despite these challenges, the potential benefits make {topic} worthy of our attention and investment.

## Looking to the Future

As we look ahead, the future of {topic} appears both exciting and uncertain. Emerging technologies, shifting societal priorities, and new discoveries will undoubtedly shape how we think about and engage with this subject in the years to come.

Experts predict several possible developments:

The integration of advanced technologies could revolutionize approaches to {topic}, making processes more efficient and outcomes more predictable. Meanwhile, growing awareness and understanding among the general public may lead to broader adoption of best practices and innovative solutions.

Sustainability and ethical considerations are likely to play an increasingly important role in discussions about {topic}. As we become more conscious of our impact and responsibilities, these factors will influence how we approach challenges and opportunities in this area.

## Conclusion

{topic} represents a rich and rewarding area of exploration. Whether you're a seasoned professional or someone just beginning to learn about this subject, there's always more to discover and understand.

The key takeaways from our discussion include the importance of staying informed about current trends, being willing to adapt to change, and recognizing both the opportunities and challenges inherent in {topic}. By maintaining curiosity, seeking out reliable information, and applying what we learn in practical ways, we can make meaningful contributions to this field.

As you continue your journey with {topic}, remember that knowledge is just the beginning. The real value comes from how we apply our understanding to create positive outcomes, solve real problems, and contribute to progress in meaningful ways.

Thank you for taking the time to explore {topic} with us. We hope this has provided valuable insights and sparked your interest in learning more about this fascinating subject."""


def tone_adjective(tone: str) -> str:
    return TONE_ADJECTIVES.get((tone or "").strip().lower(), DEFAULT_TONE_ADJECTIVE)


def derive_keywords(topic: str) -> list[str]:
    """Keywords used when the caller supplied none: topic words plus generic terms."""
    words = topic.lower().split()
    return [*words, *RELATED_TERMS][:MAX_DERIVED_KEYWORDS]


def generate_fallback_content(topic: str, tone: str, keywords: list[str]) -> str:
    keyword_text = f" focusing on {', '.join(keywords)}" if keywords else ""
    return FALLBACK_TEMPLATE.format(
        adjective=tone_adjective(tone),
        topic=topic,
        keyword_text=keyword_text,
    )


def generate_fallback_post(topic: str, tone: str, word_count: int, keywords: list[str]) -> BlogPost:
    """Build a complete post locally, without any model call.

    ``word_count`` is part of the signature so callers can pass the same
    arguments they would hand to the model; the template has a fixed size.
    """
    return BlogPost(
        title=f"{topic}: A Comprehensive Guide",
        content=generate_fallback_content(topic, tone, keywords),
        keywords=list(keywords) if keywords else derive_keywords(topic),
        outline=list(FALLBACK_OUTLINE),
    )
