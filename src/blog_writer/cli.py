from __future__ import annotations

import argparse
import asyncio
import json
import os
from pathlib import Path

from blog_writer.pipeline.post import BlogPost
from blog_writer.service.generator import GenerateService


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="blog-writer", description="Generate blog posts from a topic.")
    commands = parser.add_subparsers(dest="command", required=True)

    generate = commands.add_parser("generate", help="Generate one post and print or save it as markdown.")
    generate.add_argument("--topic", required=True, help="Subject of the blog post.")
    generate.add_argument(
        "--tone",
        default="professional",
        help="professional, casual, conversational, formal or humorous.",
    )
    generate.add_argument(
        "--length",
        default="medium",
        choices=["short", "medium", "long"],
        help="short (~500 words), medium (~1000) or long (~1500).",
    )
    generate.add_argument("--keywords", default="", help="Comma-separated keywords to focus on.")
    output = generate.add_mutually_exclusive_group()
    output.add_argument(
        "--output",
        default="",
        help="Markdown file (*.md) or directory. A directory gets a file named after the title.",
    )
    output.add_argument("--json", action="store_true", help="Print the post as JSON instead of markdown.")

    serve = commands.add_parser("serve", help="Run the web form and API.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser.parse_args(argv)


def split_keywords(raw: str) -> list[str]:
    return [part.strip() for part in raw.split(",") if part.strip()]


def is_directory_target(raw: str) -> bool:
    target = Path(raw)
    return target.is_dir() or raw.endswith(("/", os.sep)) or target.suffix.lower() != ".md"


def write_markdown(post: BlogPost, raw_target: str) -> Path:
    if is_directory_target(raw_target):
        directory = Path(raw_target)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / post.markdown_filename()
    else:
        path = Path(raw_target)
        path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(post.to_markdown(), encoding="utf-8")
    return path


async def run_generate(args: argparse.Namespace, service: GenerateService | None = None) -> int:
    if not args.topic.strip():
        print("[blog-writer] topic is required")
        return 2
    service = service or GenerateService()
    result = await service.generate(
        args.topic,
        tone=args.tone,
        length=args.length,
        keywords=split_keywords(args.keywords),
    )
    post = BlogPost(**result)
    if args.json:
        print(json.dumps(post.as_dict(), ensure_ascii=False, indent=2))
    elif args.output:
        path = write_markdown(post, args.output)
        print(f"[blog-writer] markdown={path}")
    else:
        print(post.to_markdown())
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("blog_writer.api.app:app", host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.command == "serve":
        return run_serve(args)
    return asyncio.run(run_generate(args))


if __name__ == "__main__":
    raise SystemExit(main())
