from wordsworth.textutils import (
    count_sentences,
    count_syllables,
    count_words,
    line_and_offset_at,
    mask_code_blocks,
    round_half_up,
    split_into_sentences,
    strip_markdown,
)


def test_count_words_handles_whitespace_and_markdown():
    assert count_words("The quick brown fox") == 4
    assert count_words("") == 0
    assert count_words("hello   world\n\nfoo  bar") == 4
    assert count_words("# Hello World") == 2
    assert count_words("**bold** text") == 2
    assert count_words("- list item") == 2


def test_count_sentences_respects_terminators_and_abbreviations():
    assert count_sentences("Hello world. Goodbye world.") == 2
    assert count_sentences("Hello! How are you? Fine.") == 3
    assert count_sentences("hello world") == 1
    assert count_sentences("") == 1
    assert count_sentences("Mr. Smith went home. Dr. Jones stayed.") == 2
    assert count_sentences("Use a tool, e.g. a hammer. Then stop.") == 2


def test_split_into_sentences_keeps_trailing_fragment():
    assert split_into_sentences("Hello world. Goodbye world.") == [
        "Hello world.",
        "Goodbye world.",
    ]
    assert split_into_sentences("First one. and a tail") == ["First one.", "and a tail"]
    assert split_into_sentences("   ") == []


def test_count_syllables():
    assert count_syllables("cat") == 1
    assert count_syllables("water") == 2
    assert count_syllables("beautiful") == 3
    assert count_syllables("table") == 2
    assert count_syllables("make") == 1
    assert count_syllables("a") == 1
    assert count_syllables("I") == 1
    assert count_syllables("rhythm") >= 1
    assert count_syllables("123") == 1


def test_mask_code_blocks_preserves_length_and_blanks_code():
    text = "Intro `inline API` text.\n```python\nAPI_KEY = 'x'\nprint(1)\n```\nOutro."
    masked = mask_code_blocks(text)

    assert len(masked) == len(text)
    assert masked.count("\n") == text.count("\n")
    assert "inline" not in masked
    assert "API_KEY" not in masked
    assert masked.startswith("Intro ")
    assert masked.endswith("Outro.")
    fence_start = text.index("```")
    fence_end = text.rindex("```") + 3
    assert not any(ch.isalnum() for ch in masked[fence_start:fence_end])


def test_mask_code_blocks_without_code_is_identity():
    text = "Plain prose with no code at all.\nSecond line."
    assert mask_code_blocks(text) == text


def test_strip_markdown_removes_syntax():
    text = "## Title\n> quoted line\n1. step one\n[docs](http://x.y) and ![logo](a.png) ~~old~~"
    stripped = strip_markdown(text)
    assert "#" not in stripped
    assert ">" not in stripped
    assert "1." not in stripped
    assert "docs" in stripped
    assert "http" not in stripped
    assert "!logo" in stripped
    assert "~~" not in stripped


def test_line_and_offset_at():
    text = "one\ntwo three"
    assert line_and_offset_at(text, 0) == (1, 0)
    assert line_and_offset_at(text, text.index("three")) == (2, 4)


def test_round_half_up_rounds_halves_toward_positive_infinity():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(-2.5) == -2


def test_link_rule_runs_before_image_rule():
    assert strip_markdown("See ![alt](a.png) now") == "See !alt now"
    assert count_words("See ![alt](a.png) now") == 3
