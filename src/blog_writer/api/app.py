import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from blog_writer.api.schemas import BlogPostResponse, ErrorResponse, GenerateRequest
from blog_writer.service.generator import GenerateService, GenerationError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)

INDEX_PATH = Path(__file__).resolve().parent.parent / "web" / "index.html"

app = FastAPI(title="blog-writer", version="0.1.0")
service = GenerateService()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request.invalid path=%s errors=%d", request.url.path, len(exc.errors()))
    return _error(400, "Invalid request body")


@app.exception_handler(GenerationError)
async def generation_failed(request: Request, exc: GenerationError) -> JSONResponse:
    return _error(500, "Failed to generate blog post")


@app.exception_handler(Exception)
async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("request.failed path=%s type=%s", request.url.path, exc.__class__.__name__, exc_info=exc)
    return _error(500, "Failed to generate blog post")


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    return HTMLResponse(content=INDEX_PATH.read_text(encoding="utf-8"))


@app.get("/healthz")
async def healthz() -> dict:
    return {"status": "ok"}


@app.post(
    "/api/generate",
    response_model=BlogPostResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(req: GenerateRequest) -> BlogPostResponse | JSONResponse:
    if not req.topic.strip():
        return _error(400, "Topic is required")
    result = await service.generate(req.topic, tone=req.tone, length=req.length, keywords=req.keywords)
    return BlogPostResponse(**result)
