from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    topic: str = Field(default="", description="Subject of the blog post. Required, checked by the endpoint.")
    tone: str = Field(default="professional", description="professional/casual/conversational/formal/humorous.")
    length: str = Field(default="medium", description="short (~500 words), medium (~1000) or long (~1500).")
    keywords: list[str] = Field(default_factory=list, description="Keywords the post should focus on.")


class BlogPostResponse(BaseModel):
    title: str
    content: str
    keywords: list[str]
    outline: list[str]


class ErrorResponse(BaseModel):
    error: str
