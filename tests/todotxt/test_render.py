"""Renderers — JSON and outline text produced for the playground's output pane."""

import json

from todotxt.render import outline, parse


def test_parse_empty_input_is_empty_string():
    assert parse("") == ""
    assert parse("\n   \n") == ""


def test_parse_renders_json_tool_shape():
    rendered = json.loads(parse("(A) 2011-03-01 Call Mom @phone"))
    assert rendered == [{
        "creation_date": "2011-03-01",
        "description": "Call Mom @phone",
        "priority": "A",
        "tags": [{"type": "CONTEXT", "location": {"start": 9, "end": 15}}],
        "type": "INCOMPLETE",
    }]


def test_parse_complete_task_omits_priority():
    rendered = json.loads(parse("x 2011-03-02 2011-03-01 Done +proj"))
    task = rendered[0]
    assert task["type"] == "COMPLETE"
    assert task["completion_date"] == "2011-03-02"
    assert "priority" not in task


def test_parse_one_entry_per_task_line():
    rendered = json.loads(parse("one\n\ntwo\nthree"))
    assert [t["description"] for t in rendered] == ["one", "two", "three"]


def test_parse_is_pure():
    text = "(B) something +x @y key:value"
    assert parse(text) == parse(text)


def test_parse_accepts_arbitrary_input():
    for text in ["(", "x", "((A))", "\x00\x01", "🙂 @ + :", "9999-99-99 "]:
        assert isinstance(parse(text), str)


def test_outline_lists_fields_and_tags():
    text = outline("(A) Thank Mom @phone +family")
    assert text.splitlines()[0] == "Task"
    assert "  priority: (A)" in text
    assert "  is_complete: False" in text
    assert "    context: @phone" in text
    assert "    project: +family" in text


def test_outline_empty_input():
    assert outline("") == ""


def test_outline_task_without_tags():
    assert "  tags: []" in outline("plain")
