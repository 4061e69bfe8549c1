from fastapi.testclient import TestClient

from blog_writer.api.app import app, service
from blog_writer.config import Settings
from blog_writer.service.generator import GenerationError
from blog_writer.workflow.generation import GenerationWorkflow

client = TestClient(app)


def test_healthz() -> None:
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_index_serves_form() -> None:
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert "Blog Writing Agent" in resp.text
    assert 'fetch("/api/generate"' in resp.text


def test_generate_shape(monkeypatch) -> None:
    captured: dict = {}

    async def fake_generate(topic: str, tone: str = "professional", length: str = "medium", keywords=None) -> dict:
        captured.update(topic=topic, tone=tone, length=length, keywords=keywords)
        return {"title": f"{topic}!", "content": "body", "keywords": keywords, "outline": ["One", "Two"]}

    monkeypatch.setattr(service, "generate", fake_generate)

    resp = client.post(
        "/api/generate",
        json={"topic": "Sailing", "tone": "humorous", "length": "long", "keywords": ["wind", "knots"]},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "title": "Sailing!",
        "content": "body",
        "keywords": ["wind", "knots"],
        "outline": ["One", "Two"],
    }
    assert captured == {"topic": "Sailing", "tone": "humorous", "length": "long", "keywords": ["wind", "knots"]}


def test_empty_topic_is_rejected_without_generation(monkeypatch) -> None:
    calls: list[str] = []

    async def fake_generate(topic: str, **kwargs) -> dict:
        calls.append(topic)
        return {}

    monkeypatch.setattr(service, "generate", fake_generate)

    for body in ({"topic": ""}, {"topic": "   ", "keywords": ["x"]}, {"tone": "casual"}):
        resp = client.post("/api/generate", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Topic is required"}
    assert calls == []


def test_malformed_body_is_rejected() -> None:
    resp = client.post("/api/generate", content="not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid request body"}

    resp = client.post("/api/generate", json={"topic": "Sailing", "keywords": "wind"})
    assert resp.status_code == 400


def test_generation_failure_returns_generic_500(monkeypatch) -> None:
    async def fake_generate(topic: str, **kwargs) -> dict:
        raise GenerationError("secret upstream detail")

    monkeypatch.setattr(service, "generate", fake_generate)

    resp = client.post("/api/generate", json={"topic": "Sailing"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate blog post"}


def test_unexpected_exception_returns_generic_500(monkeypatch) -> None:
    async def fake_generate(topic: str, **kwargs) -> dict:
        raise RuntimeError("boom")

    monkeypatch.setattr(service, "generate", fake_generate)

    resp = TestClient(app, raise_server_exceptions=False).post("/api/generate", json={"topic": "Sailing"})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to generate blog post"}


def test_missing_credential_falls_back_silently(monkeypatch) -> None:
    workflow = GenerationWorkflow(settings=Settings(LLM_PROVIDER="anthropic", ANTHROPIC_API_KEY=""))
    monkeypatch.setattr(service, "_workflow", workflow)

    resp = client.post("/api/generate", json={"topic": "Night Photography", "length": "short", "keywords": []})
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Night Photography: A Comprehensive Guide"
    assert data["keywords"] == ["night", "photography", "trends", "innovation", "future"]
    assert len(data["outline"]) == 6
    assert "error" not in data


def test_openapi_documents_post_and_error_shapes() -> None:
    schema = client.get("/openapi.json").json()
    responses = schema["paths"]["/api/generate"]["post"]["responses"]

    assert responses["200"]["content"]["application/json"]["schema"]["$ref"].endswith("/BlogPostResponse")
    assert responses["400"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
    assert responses["500"]["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
