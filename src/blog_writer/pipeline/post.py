import re
from dataclasses import asdict, dataclass, field

_WHITESPACE = re.compile(r"\s+")
_PATH_CHARS = re.compile(r"[\\/]")


@dataclass
class BlogPost:
    title: str
    content: str
    keywords: list[str] = field(default_factory=list)
    outline: list[str] = field(default_factory=list)

    def as_dict(self) -> dict:
        return asdict(self)

    def to_markdown(self) -> str:
        return f"# {self.title}\n\n{self.content}"

    def markdown_filename(self) -> str:
        slug = _PATH_CHARS.sub("", _WHITESPACE.sub("-", self.title.strip().lower()))
        return f"{slug or 'blog-post'}.md"
