import pytest

from typerow.layout import (
    SCORE_TEMPLATE,
    Component,
    ComponentKind,
    Layout,
    row_size,
    substitute,
    unit_size,
)


def test_substitute_known_and_unknown_keys():
    assert substitute("a {{x}} b {{y}}", {"x": "1"}) == "a 1 b {{y}}"
    assert substitute("{{x}}{{x}}", {"x": "ab"}) == "abab"


def test_substitute_does_not_expand_values():
    assert substitute("{{x}} {{y}}", {"x": "{{y}}", "y": "2"}) == "{{y}} 2"


def test_full_state_leaves_no_placeholders():
    state = {"time": "1", "correct": "2", "incorrect": "3", "accuracy": "4", "wpm": "5"}
    for line in SCORE_TEMPLATE:
        assert "{{" not in substitute(line, state)


def test_component_variants():
    assert [Component.new(i).kind for i in ("words", "word", "score")] == [
        ComponentKind.WORDS,
        ComponentKind.WORD,
        ComponentKind.SCORE,
    ]
    assert Component.new("words").template == ("", "{{row1}}", "{{row2}}")
    assert Component.new("word").template == ("", "{{word}}", "")
    with pytest.raises(ValueError):
        Component.new("nope")


def test_state_is_copied():
    component = Component.new("word")
    state = {"word": "hi"}
    component.set_state(state)
    state["word"] = "changed"
    assert component.get_state() == {"word": "hi"}


def test_line_past_template_is_empty():
    component = Component.new("word")
    component.set_state({"word": "hi"})
    assert component.line(1) == "hi"
    assert component.line(3) == ""


def test_sizes():
    assert unit_size(["", "abc", "de"]) == (3, 3)
    words = Component.new("words")
    word = Component.new("word")
    assert words.size() == (3, 8)
    assert row_size([words, word]) == (3, 16)
    assert Layout.play().size() == (6, 8)
    assert Layout.score().size() == (3, len(SCORE_TEMPLATE[1]))


def test_missing_rows_are_neutral():
    layout = Layout.play()
    assert layout.get_row(5) == []
    assert layout.get_row_size(5) is None
    assert layout.get_row_size(0) == (3, 8)


def test_update_and_replace():
    layout = Layout.play()
    layout.update("words", ("row1", "one"))
    layout.update("words", ("row2", "two"))
    layout.update("nothing", ("row1", "x"))
    assert layout.find("words").state == {"row1": "one", "row2": "two"}
    layout.replace("words", {"row1": "only"})
    assert layout.find("words").state == {"row1": "only"}


def test_lines_walk_rows_and_components():
    layout = Layout([[Component.new("word"), Component.new("word")], [Component.new("words")]])
    layout.rows[0][0].set_state({"word": "a"})
    layout.rows[0][1].set_state({"word": "b"})
    layout.update("words", ("row1", "r1"))
    assert layout.lines() == ["", "ab", "", "", "r1", "{{row2}}"]
