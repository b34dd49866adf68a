import pytest

from atframe.ansi import (
    Color,
    TextSegment,
    background_8,
    background_16,
    color_8,
    color_16,
    color_256,
    parse_ansi,
)

WHITE = Color(1.0, 1.0, 1.0, 1.0)
CLEAR = Color(0.0, 0.0, 0.0, 0.0)


def test_color_8_table_and_default():
    assert color_8(1) == Color(0.9, 0.1, 0.1, 1.0)
    assert color_8(7) == Color(0.75, 0.75, 0.75, 1.0)
    assert color_8(8) == WHITE
    assert color_8(-1) == WHITE


def test_color_16_table_and_default():
    assert color_16(8) == Color(0.5, 0.5, 0.5, 1.0)
    assert color_16(15) == WHITE
    assert color_16(7) == WHITE
    assert color_16(12) == Color(0.0, 0.0, 1.0, 1.0)


def test_background_tables_default_transparent():
    assert background_8(1) == Color(0.5, 0.0, 0.0, 1.0)
    assert background_8(8) == CLEAR
    assert background_16(0) == Color(0.5, 0.5, 0.5, 1.0)
    assert background_16(-1) == CLEAR


def test_color_256_low_indices_use_basic_tables():
    for index in range(8):
        assert color_256(index) == color_8(index)
    for index in range(8, 16):
        assert color_256(index) == color_16(index)


def test_color_256_cube_corners():
    assert color_256(16) == Color(0.0, 0.0, 0.0, 1.0)
    assert color_256(231) == Color(1.0, 1.0, 1.0, 1.0)
    assert color_256(196) == Color(1.0, 0.0, 0.0, 1.0)


def test_color_256_grayscale_is_gray_and_increasing():
    grays = [color_256(i) for i in range(232, 256)]
    for c in grays:
        assert c.r == c.g == c.b
        assert c.a == 1.0
    values = [c.r for c in grays]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_color_256_clamps():
    assert color_256(1000) == color_256(255)
    assert color_256(-5) == color_256(0)


def test_plain_text_single_default_segment():
    segments = parse_ansi("hello")
    assert segments == [TextSegment("hello", WHITE, CLEAR)]
    assert not segments[0].has_background


def test_empty_text():
    assert parse_ansi("") == []


def test_foreground_and_reset():
    segments = parse_ansi("a\033[31mb\033[0mc")
    assert [s.text for s in segments] == ["a", "b", "c"]
    assert segments[0].color == WHITE
    assert segments[1].color == color_8(1)
    assert segments[2].color == WHITE


def test_bright_foreground():
    (segment,) = parse_ansi("\033[91mX")
    assert segment.color == color_16(9)


def test_extended_256_foreground():
    (segment,) = parse_ansi("\033[38;5;196mX")
    assert segment.color == color_256(196)


def test_extended_rgb_foreground():
    (segment,) = parse_ansi("\033[38;2;255;0;0mX")
    assert segment.color == Color(1.0, 0.0, 0.0, 1.0)


def test_incomplete_rgb_leaves_color():
    (segment,) = parse_ansi("\033[38;2;1mX")
    assert segment.color == WHITE


def test_backgrounds():
    (seg8,) = parse_ansi("\033[42mX")
    assert seg8.background == background_8(2)
    assert seg8.has_background
    (seg16,) = parse_ansi("\033[101mX")
    assert seg16.background == background_16(1)
    (seg256,) = parse_ansi("\033[48;5;21mX")
    assert seg256.background == color_256(21)


def test_background_reset_keeps_foreground():
    (segment,) = parse_ansi("\033[32;41m\033[49mX")
    assert segment.background == CLEAR
    assert segment.color == color_8(2)


def test_bold_brightens_and_caps():
    (plain,) = parse_ansi("\033[34mX")
    (bold,) = parse_ansi("\033[34;1mX")
    assert bold.color.b > plain.color.b
    assert bold.color.r == plain.color.r == 0.0
    (white_bold,) = parse_ansi("\033[1mX")
    assert white_bold.color == WHITE


def test_empty_parameter_list_changes_nothing():
    (segment,) = parse_ansi("\033[31m\033[mX")
    assert segment.color == color_8(1)


def test_escape_without_bracket_is_skipped():
    segments = parse_ansi("a\033Xmb")
    assert [s.text for s in segments] == ["a", "b"]
    assert all(s.color == WHITE for s in segments)


def test_unterminated_escape_raises():
    with pytest.raises(ValueError):
        parse_ansi("ab\033[31")