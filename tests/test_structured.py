# ===============================================
# tests/test_structured.py
# JSON extraction from model text and Markdown rendering.
# ===============================================
from chatrelay.generate import Message
from chatrelay.generate.structured import (
    CONFIG_HINT,
    build_mock_reply,
    structured_to_markdown,
    try_parse_structured,
)

FULL = {
    "title": "Lists",
    "summary": "How to sort a list.",
    "sections": [{"heading": "Sorting", "content": "Use `sorted()`."}],
    "examples": [{"input": "sorted([3, 1])", "output": "[1, 3]"}],
    "notes": "Stable sort.",
}


def test_no_braces_returns_none():
    assert try_parse_structured("plain answer") is None
    assert try_parse_structured("} backwards {") is None


def test_malformed_json_returns_none():
    assert try_parse_structured('{"sections": [}') is None


def test_json_without_sections_returns_none():
    assert try_parse_structured('{"title": "x"}') is None
    assert try_parse_structured("[1, 2]") is None


def test_fenced_json_with_prose_is_parsed():
    text = 'Sure! Here it is:\n```json\n{"title": "T", "sections": []}\n```\nHope that helps.'
    assert try_parse_structured(text) == {"title": "T", "sections": []}


def test_non_string_input_returns_none():
    assert try_parse_structured(None) is None


def test_markdown_layout():
    md = structured_to_markdown(FULL)
    assert md == (
        "# Lists\n\n"
        "How to sort a list.\n\n"
        "## Sorting\nUse `sorted()`.\n\n"
        "## Examples\n\n"
        "**Input**\n```\nsorted([3, 1])\n```\n\n"
        "**Output**\n```\n[1, 3]\n```\n\n"
        "> Stable sort."
    )


def test_markdown_omits_absent_fields():
    md = structured_to_markdown({"sections": [{"heading": "Only", "content": "body"}], "notes": None})
    assert md == "## Only\nbody"
    assert "Examples" not in md
    assert ">" not in md


def test_markdown_is_deterministic_and_trimmed():
    assert structured_to_markdown(FULL) == structured_to_markdown(FULL)
    assert structured_to_markdown({"sections": []}) == ""


def test_mock_reply_echoes_last_user_message():
    messages = [
        Message(role="user", content="first"),
        Message(role="assistant", content="ok"),
        Message(role="user", content="Hello"),
    ]
    reply = build_mock_reply(messages)
    assert reply["summary"] == "You said: Hello"
    assert reply["notes"] == CONFIG_HINT
    assert "sections" in reply
    assert build_mock_reply(messages) == reply


def test_sections_must_be_a_list():
    for value in ("5", "true", '"abc"', "null", '{"heading": "x"}'):
        assert try_parse_structured('Answer: {"title": "x", "sections": ' + value + "}") is None


def test_renderer_ignores_non_list_examples_and_sections():
    md = structured_to_markdown({"title": "T", "sections": "abc", "examples": 3})
    assert md == "# T"
