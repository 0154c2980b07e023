import json
import logging

import pytest
from langgraph.store.memory import InMemoryStore

from open_canvas_context.core.exceptions import InvalidArgumentError, MissingConfigError
from open_canvas_context.core.reflections import (
    NO_REFLECTIONS,
    Reflections,
    ensure_store_in_config,
    format_reflections,
    get_formatted_reflections,
)


def test_both_flags_rejected():
    with pytest.raises(InvalidArgumentError):
        format_reflections({"styleRules": [], "content": []}, only_style=True, only_content=True)


def test_list_rules_only_first_item_bulleted():
    out = format_reflections({"styleRules": ["a", "b"], "content": ["likes tea"]})
    assert "<style-guidelines>\n- a\nb\n</style-guidelines>" in out
    assert "<user-facts>\n- likes tea\n</user-facts>" in out


def test_json_encoded_rules_are_parsed():
    out = format_reflections(
        {"styleRules": json.dumps(["short sentences", "no emojis"]), "content": json.dumps([])},
        only_style=True,
    )
    assert "- short sentences\nno emojis" in out
    assert "user-facts" not in out


def test_unparseable_style_rules_fall_back(caplog):
    with caplog.at_level(logging.ERROR):
        out = format_reflections({"styleRules": "not json", "content": ["writes in Go"]})
    assert "- No style guidelines found." in out
    assert "- writes in Go" in out
    assert any("style rules" in r.getMessage() for r in caplog.records)


def test_non_list_json_content_falls_back(caplog):
    with caplog.at_level(logging.ERROR):
        out = format_reflections({"styleRules": [], "content": '{"a": 1}'}, only_content=True)
    assert out == (
        "The following is a list of memories/facts you previously generated about the user:\n"
        "<user-facts>\n- No memories/facts found.\n</user-facts>"
    )
    assert caplog.records


def test_blocks_joined_with_blank_line():
    out = format_reflections(Reflections(styleRules=["s"], content=["c"]))
    style, content = out.split("\n\n")
    assert style.startswith("The following is a list of style guidelines")
    assert content.endswith("</user-facts>")


def test_formatted_reflections_without_store():
    assert get_formatted_reflections({"configurable": {"assistant_id": "a1"}}) == NO_REFLECTIONS


def test_formatted_reflections_requires_assistant_id():
    with pytest.raises(MissingConfigError):
        get_formatted_reflections({"configurable": {}}, InMemoryStore())


def test_formatted_reflections_reads_store():
    store = InMemoryStore()
    store.put(("memories", "a1"), "reflection", {"styleRules": ["be brief"], "content": ["is a chef"]})
    out = get_formatted_reflections({"configurable": {"assistant_id": "a1"}}, store)
    assert "- be brief" in out
    assert "- is a chef" in out


def test_formatted_reflections_missing_item():
    out = get_formatted_reflections({"configurable": {"assistant_id": "nobody"}}, InMemoryStore())
    assert out == NO_REFLECTIONS


def test_ensure_store():
    store = InMemoryStore()
    assert ensure_store_in_config(store) is store
    with pytest.raises(MissingConfigError):
        ensure_store_in_config(None)


def test_missing_style_rules_use_placeholder(caplog):
    with caplog.at_level(logging.ERROR):
        out = format_reflections({"content": ["x"]}, only_style=True)
    assert "<style-guidelines>\n- No style guidelines found.\n</style-guidelines>" in out


def test_missing_content_uses_placeholder():
    out = format_reflections(Reflections(styleRules=["be brief"]))
    assert "<user-facts>\n- No memories/facts found.\n</user-facts>" in out
    assert "- be brief" in out
