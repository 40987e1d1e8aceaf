"""Tests for RequestComposer."""

from gpt_agent.core.composer import SEARCH_NOTICE, SYSTEM_PROMPT, RequestComposer
from gpt_agent.core.window import ConversationWindow
from gpt_agent.types import Turn


def test_plain_request():
    messages = RequestComposer().compose("Why is my loop slow?", ConversationWindow())
    assert messages == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "Why is my loop slow?"},
    ]


def test_context_wraps_question():
    messages = RequestComposer().compose(
        "Why is my loop slow?", ConversationWindow(), context="Python 3.12, pandas",
    )
    assert messages[-1]["content"] == "Context: Python 3.12, pandas\n\nQuestion: Why is my loop slow?"


def test_augmented_request():
    messages = RequestComposer().compose(
        "latest Django?",
        ConversationWindow(),
        context="legacy app",
        augmented=True,
        search_text="Django 5.x",
    )
    assert messages[0]["content"].endswith(SEARCH_NOTICE)
    assert messages[-1]["content"] == (
        "Context: legacy app\n\nQuestion: latest Django?\n\nWeb Search Results: Django 5.x"
    )


def test_search_text_ignored_when_not_augmented():
    messages = RequestComposer().compose(
        "hello", ConversationWindow(), augmented=False, search_text="ignored",
    )
    assert "Web Search Results" not in messages[-1]["content"]
    assert SEARCH_NOTICE not in messages[0]["content"]


def test_window_between_system_and_user():
    window = ConversationWindow()
    window.append_pair(Turn(role="user", content="q0"), Turn(role="assistant", content="a0"))
    messages = RequestComposer().compose("q1", window)
    assert [m["role"] for m in messages] == ["system", "user", "assistant", "user"]
    assert messages[1]["content"] == "q0"
    assert messages[3]["content"] == "q1"
