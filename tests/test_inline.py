"""Tests for the inline span scanner.

Covers:
- Bold and italic ordering, leftmost and shortest matches
- Unterminated and empty markers staying literal
- Asterisk runs next to consumed text
- Line breaks inside marker content
"""

from __future__ import annotations

from thejournal.content import Bold, Italic, Plain, parse_inline


def test_bold_and_italic_in_order() -> None:
    assert parse_inline("**a** and *b*") == [Bold("a"), Plain(" and "), Italic("b")]


def test_no_markers_is_single_plain_span() -> None:
    assert parse_inline("nothing special here") == [Plain("nothing special here")]


def test_empty_string_is_single_empty_plain() -> None:
    assert parse_inline("") == [Plain("")]


def test_unterminated_bold_stays_literal() -> None:
    assert parse_inline("**unterminated") == [Plain("**unterminated")]


def test_unterminated_italic_stays_literal() -> None:
    assert parse_inline("a * b") == [Plain("a * b")]


def test_empty_markers_are_not_matched() -> None:
    assert parse_inline("****") == [Plain("****")]
    assert parse_inline("x ** y") == [Plain("x ** y")]


def test_leftmost_marker_wins() -> None:
    assert parse_inline("*soft* then **loud**") == [Italic("soft"), Plain(" then "), Bold("loud")]


def test_bold_is_shortest_match() -> None:
    assert parse_inline("**a** b **c**") == [Bold("a"), Plain(" b "), Bold("c")]


def test_triple_asterisks_resolve_to_bold_with_literal_star() -> None:
    assert parse_inline("***x***") == [Bold("*x"), Plain("*")]


def test_consumed_text_is_invisible_to_italic_neighbour_check() -> None:
    assert parse_inline("**a***b*") == [Bold("a"), Italic("b")]


def test_italic_ignores_asterisks_inside_bold_runs() -> None:
    # The only single-star candidates are the outer pair.
    assert parse_inline("*x **y** z*") == [Italic("x **y** z")]


def test_markers_do_not_cross_line_breaks() -> None:
    assert parse_inline("**a\nb**") == [Plain("**a\nb**")]
    assert parse_inline("*a\nb*") == [Plain("*a\nb*")]


def test_trailing_text_after_last_marker() -> None:
    assert parse_inline("pre *mid* post") == [Plain("pre "), Italic("mid"), Plain(" post")]


def test_unicode_text_is_preserved() -> None:
    assert parse_inline("這是**重點**文字") == [Plain("這是"), Bold("重點"), Plain("文字")]
