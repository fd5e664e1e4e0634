"""
Tests for result message rendering.
"""

from __future__ import annotations

from rollshop.application.use_cases.result_message import render_roll_result_message
from rollshop.application.use_cases.transaction import create_transaction_record
from rollshop.application.utils.roll_parser import parse_customer_rolls
from rollshop.domain.entities.pick_strategy import PickStrategy


def test_end_to_end_lowest_pick():
    """Parse, pick the lowest roll and announce it."""
    rolls = parse_customer_rolls("[TagA] Alice rolls 672 points!\nBob rolls 127 points!")
    record = create_transaction_record(rolls, "Mira", "sketch", 1, 0, pick_strategy=PickStrategy.MIN, winner_count=1)
    message = render_roll_result_message(record)

    assert "1. Bob（127点）" in message
    assert "Alice" not in message
    assert "lowest" in message
    assert "slots: 1" in message
    assert "[Mira]" in message
    assert "[sketch]" in message


def test_winners_are_joined_with_full_width_semicolon(make_record):
    record = make_record(rolls=(("A", 90), ("B", 80), ("C", 10)), amount=2, pick_strategy=PickStrategy.MAX)
    message = render_roll_result_message(record)
    assert "1. A（90点）；2. B（80点）" in message
    assert "2 customers selected" in message
    assert "highest" in message


def test_no_winners_notice(make_record):
    message = render_roll_result_message(make_record(rolls=()))
    assert message.startswith("No qualifying customers")


def test_money_and_refusal_lines_are_optional(make_record):
    plain = render_roll_result_message(make_record())
    assert "Transaction amount" not in plain
    assert "Refusal type" not in plain

    detailed = render_roll_result_message(make_record(money=3000, refusal_type="price objection"))
    assert "Transaction amount: 3000" in detailed
    assert "Refusal type: price objection" in detailed


def test_chinese_rendering(make_record):
    message = render_roll_result_message(make_record(money=500), language="zh")
    assert "1. Bob（127点）" in message
    assert "最低点优先" in message
    assert "交易金额：500" in message
    assert render_roll_result_message(make_record(rolls=()), language="zh").startswith("本次未筛选出")


def test_round_trip_never_returns_notice():
    for strategy in PickStrategy:
        rolls = parse_customer_rolls("noise\nZed rolls 1 point")
        record = create_transaction_record(rolls, "", "", 1, 0, pick_strategy=strategy, winner_count=1)
        assert not render_roll_result_message(record).startswith("No qualifying customers")
