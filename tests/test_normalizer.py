import json

from blog_writer.pipeline.normalizer import normalize_reply


def test_json_reply_is_used_as_is() -> None:
    payload = {
        "title": "Ethical AI in Practice",
        "content": "Intro\n\n## Principles\n\ntext",
        "keywords": ["ai", "ethics", "governance"],
        "outline": ["Intro", "Principles"],
    }
    reply = f"Sure! Here is your post:\n{json.dumps(payload)}\nHope it helps."

    post = normalize_reply(reply, "Ethical AI", ["ai"])

    assert post.title == "Ethical AI in Practice"
    assert post.content == "Intro\n\n## Principles\n\ntext"
    assert post.keywords == ["ai", "ethics", "governance"]
    assert post.outline == ["Intro", "Principles"]


def test_json_reply_missing_fields_is_completed() -> None:
    reply = json.dumps({"content": "Opening\n## First\n## Second\n"})

    post = normalize_reply(reply, "Gardening", ["soil"])

    assert post.title == "Gardening: A Comprehensive Guide"
    assert post.keywords == ["soil"]
    assert post.outline == ["First", "Second"]


def test_json_reply_with_comma_separated_keywords() -> None:
    reply = json.dumps({"title": "T", "content": "C", "keywords": "a, b ,", "outline": []})

    post = normalize_reply(reply, "Topic", [])

    assert post.keywords == ["a", "b"]
    assert post.outline == ["Introduction", "Main Discussion", "Conclusion"]


def test_unparseable_json_uses_first_line_as_title() -> None:
    reply = "# Remote Work Unpacked\nTeams now share {ideas, not offices}.\n\n## Tools\nchat\n## Culture\ntrust"

    post = normalize_reply(reply, "Remote Work", [])

    assert post.title == "Remote Work Unpacked"
    assert post.content.startswith("Teams now share")
    assert post.outline == ["Tools", "Culture"]
    assert post.keywords == ["remote", "work", "trends", "innovation", "future"]


def test_blank_first_line_gets_synthesized_title() -> None:
    reply = "   \nBody with {broken json}"

    post = normalize_reply(reply, "Coffee", ["beans"])

    assert post.title == "Coffee: Insights and Analysis"
    assert post.content == "Body with {broken json}"
    assert post.keywords == ["beans"]


def test_json_array_is_not_treated_as_post() -> None:
    reply = 'Headline\n{"a": 1} and {"b": 2}'

    post = normalize_reply(reply, "Lists", [])

    assert post.title == "Headline"


def test_plain_text_reply_is_wrapped() -> None:
    reply = "Just some prose without any structure.\n\n## Only Section\nmore"

    post = normalize_reply(reply, "Prose", ["style"])

    assert post.title == "Prose: A Comprehensive Guide"
    assert post.content == reply
    assert post.keywords == ["style"]
    assert post.outline == ["Only Section"]


def test_json_reply_with_raw_newlines_in_strings() -> None:
    reply = '{\n  "title": "Slow Travel",\n  "content": "First paragraph.\n\n## Trains\nRide them.",\n  "keywords": ["rail"]\n}'

    post = normalize_reply(reply, "Travel", [])

    assert post.title == "Slow Travel"
    assert post.content == "First paragraph.\n\n## Trains\nRide them."
    assert post.keywords == ["rail"]
    assert post.outline == ["Trains"]
