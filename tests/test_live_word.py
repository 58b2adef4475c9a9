import random

from typerow.words import GREEN, RED, RESET, LiveWord


def typed(expected, actual):
    word = LiveWord(expected)
    for c in actual:
        word.push(c)
    return word


def test_matched_follows_actual():
    word = LiveWord("cat")
    assert not word.matched
    word.push("c")
    word.push("a")
    assert not word.matched
    word.push("t")
    assert word.matched
    word.push("s")
    assert not word.matched
    word.pop()
    assert word.matched


def test_pop_on_empty_is_harmless():
    word = LiveWord("a")
    word.pop()
    assert word.actual == ""
    assert not word.matched


def test_matched_invariant_under_random_edits():
    rng = random.Random(7)
    word = LiveWord("abc")
    for _ in range(500):
        if rng.random() < 0.4:
            word.pop()
        else:
            word.push(rng.choice("abcx"))
        assert word.matched == (word.actual == word.expected)


def test_correct_stroke_count_is_common_prefix():
    assert typed("cat", "").correct_stroke_count() == 0
    assert typed("cat", "ca").correct_stroke_count() == 2
    assert typed("cat", "cxt").correct_stroke_count() == 1
    assert typed("cat", "cats").correct_stroke_count() == 3
    assert typed("cat", "dog").correct_stroke_count() == 0


def test_stroke_count_bounded_by_shorter_side():
    rng = random.Random(3)
    for _ in range(200):
        actual = "".join(rng.choice("ab") for _ in range(rng.randint(0, 6)))
        word = typed("abab", actual)
        assert word.correct_stroke_count() <= min(len(actual), 4)


def test_render_final():
    assert typed("cat", "cat").render_final() == f"{GREEN}cat{RESET}"
    assert typed("cat", "ca").render_final() == f"{RED}cat{RESET}"


def test_render_active_untouched():
    assert LiveWord("cat").render_active() == f"{GREEN}{RESET}cat{RESET}"


def test_render_active_partial_prefix():
    assert typed("cat", "c").render_active() == f"{GREEN}c{RESET}at{RESET}"


def test_render_active_complete():
    assert typed("cat", "cat").render_active() == f"{GREEN}cat{RESET}"
    assert typed("cat", "catty").render_active() == f"{GREEN}cat{RESET}"


def test_render_active_first_mistake_in_red():
    assert typed("cat", "cx").render_active() == f"{GREEN}c{RED}a{RESET}t{RESET}"


def test_render_active_ignores_input_after_mistake():
    assert typed("cat", "xat").render_active() == typed("cat", "x").render_active()
    assert typed("cat", "xat").render_active() == f"{GREEN}{RED}c{RESET}at{RESET}"
