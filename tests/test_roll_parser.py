"""
Tests for chat-log roll parsing.
"""

from __future__ import annotations

from rollshop.application.utils.roll_parser import clean_customer_name, parse_customer_rolls
from rollshop.domain.entities.customer_roll import CustomerRoll


def test_parses_tagged_english_log():
    """Channel tags are stripped and lines keep their order."""
    text = "[TagA] Alice rolls 672 points!\nBob rolls 127 points!"
    assert parse_customer_rolls(text) == [
        CustomerRoll(customer_id="Alice", roll_value=672),
        CustomerRoll(customer_id="Bob", roll_value=127),
    ]


def test_parses_chinese_log_with_stacked_prefixes():
    text = "[晓晓贝8]<维加斯> 宇宙和香 掷出了 672 点！\n【公会】小明 擲出 9 点"
    assert parse_customer_rolls(text) == [
        CustomerRoll(customer_id="宇宙和香", roll_value=672),
        CustomerRoll(customer_id="小明", roll_value=9),
    ]


def test_max_annotation_drops_line():
    assert parse_customer_rolls("Alice rolls 88 points (max100)") == []
    assert parse_customer_rolls("宇宙和香 掷出了 672 点！（最大999）") == []
    assert parse_customer_rolls("Bob rolls 5 points (MAX 10)") == []


def test_parenthesized_tags_before_the_name_are_not_max_annotations():
    text = "(Maxine) Bob rolls 50 points\n[Guild](Maxwell) Ann rolls 7 points"
    assert parse_customer_rolls(text) == [
        CustomerRoll(customer_id="Bob", roll_value=50),
        CustomerRoll(customer_id="Ann", roll_value=7),
    ]


def test_noise_and_blank_lines_are_ignored():
    text = "\n\n  hello everyone  \nCarol rolled out 42 points\r\nDave: I will roll later\n   \n"
    assert parse_customer_rolls(text) == [CustomerRoll(customer_id="Carol", roll_value=42)]


def test_five_digit_values_never_match():
    assert parse_customer_rolls("Alice rolls 12345 points") == []
    assert parse_customer_rolls("Alice rolls 9999 points") == [CustomerRoll("Alice", 9999)]
    assert parse_customer_rolls("Alice rolls 0 points") == [CustomerRoll("Alice", 0)]


def test_full_width_digits_are_not_roll_values():
    assert parse_customer_rolls("Alice rolls ８８ points") == []


def test_duplicate_names_are_kept():
    text = "Alice rolls 10 points\nAlice rolls 20 points"
    assert [r.roll_value for r in parse_customer_rolls(text)] == [10, 20]


def test_name_that_is_only_tags_is_dropped():
    assert parse_customer_rolls("[TagA] rolls 50 points") == []
    assert parse_customer_rolls("★★ rolls 50 points") == []


def test_name_cleanup_strips_symbols_but_keeps_inner_text():
    assert clean_customer_name("[Guild] ★Neko-chan_2★") == "Neko-chan_2"
    assert clean_customer_name("(FC)(World) Mira Lune") == "Mira Lune"


def test_parse_is_deterministic():
    text = "[TagA] Alice rolls 672 points!\nBob rolls 127 points!\nnoise"
    assert parse_customer_rolls(text) == parse_customer_rolls(text)


def test_empty_input():
    assert parse_customer_rolls("") == []
