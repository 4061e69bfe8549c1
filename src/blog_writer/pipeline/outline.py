import re

HEADING_PATTERN = re.compile(r"^##\s+")
DEFAULT_OUTLINE = ("Introduction", "Main Discussion", "Conclusion")


def extract_outline(text: str) -> list[str]:
    """Collect second-level markdown headings in document order."""
    outline: list[str] = []
    for line in text.split("\n"):
        if HEADING_PATTERN.match(line):
            outline.append(HEADING_PATTERN.sub("", line).strip())
    return outline or list(DEFAULT_OUTLINE)
