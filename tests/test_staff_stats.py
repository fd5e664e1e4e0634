"""
Tests for staff aggregation and the export table.
"""

from __future__ import annotations

from rollshop.application.use_cases.staff_stats import (
    EXPORT_HEADER,
    aggregate_staff_stats,
    build_staff_export_table,
)
from rollshop.application.utils.csv_export import export_filename, render_csv


def test_groups_by_staff_and_service_in_first_seen_order(make_record):
    records = [
        make_record(staff_id="Mira", service_name="sketch", amount=2, money=1000),
        make_record(staff_id="Kai", service_name="photography", amount=1, money=0),
        make_record(staff_id="Mira", service_name="sketch", amount=3, money=501, refusal_type="style mismatch"),
        make_record(staff_id="Mira", service_name="photography", amount=1, money=10),
    ]
    stats = aggregate_staff_stats(records)

    assert [(s.staff_id, s.service_name) for s in stats] == [
        ("Mira", "sketch"),
        ("Kai", "photography"),
        ("Mira", "photography"),
    ]
    mira = stats[0]
    assert mira.total_count == 5
    assert mira.transaction_count == 2
    assert mira.total_money == 1501
    assert mira.refusal_summary == {"none": 1, "style mismatch": 1}
    assert mira.salary == 500 + 251


def test_salary_rounds_half_up_per_record(make_record):
    records = [make_record(money=3), make_record(money=3)]
    [stat] = aggregate_staff_stats(records)
    # 1.5 rounds to 2 on each record; rounding the total would give 3
    assert stat.salary == 4


def test_conservation(make_record):
    records = [make_record(staff_id=f"s{i % 3}", amount=i + 1, money=i * 7) for i in range(10)]
    stats = aggregate_staff_stats(records)
    assert sum(s.total_count for s in stats) == sum(r.amount for r in records)
    assert sum(s.total_money for s in stats) == sum(r.money for r in records)
    assert sum(s.transaction_count for s in stats) == len(records)


def test_records_are_left_untouched(make_record):
    record = make_record(money=10)
    aggregate_staff_stats([record])
    aggregate_staff_stats([record])
    [stat] = aggregate_staff_stats([record])
    assert stat.total_money == 10
    assert record.money == 10


def test_export_table_rows_and_totals(make_record):
    records = [
        make_record(staff_id="Mira", amount=2, money=1000, refusal_type="price objection"),
        make_record(staff_id="Mira", amount=1, money=0, refusal_type="price objection"),
        make_record(staff_id="Kai", service_name="photography", amount=1, money=300),
    ]
    table = build_staff_export_table(aggregate_staff_stats(records))

    assert table[0] == list(EXPORT_HEADER)
    assert len(table[0]) == 7
    assert table[1] == ["Mira", "sketch", 3, 2, 1000, "price objection (2)", 500]
    assert table[2] == ["Kai", "photography", 1, 1, 300, "no refusals", 150]
    assert table[-1] == ["Total", "-", 4, 3, 1300, "-", 650]


def test_export_table_for_no_stats():
    assert build_staff_export_table([]) == [list(EXPORT_HEADER), ["Total", "-", 0, 0, 0, "-", 0]]


def test_csv_quotes_every_cell_and_starts_with_bom():
    csv_text = render_csv([["Staff ID", "Slots"], ["Mira", 3], ['say "hi"', 0]])
    assert csv_text.startswith("\ufeff")
    assert csv_text[1:].split("\n") == ['"Staff ID","Slots"', '"Mira","3"', '"say ""hi""","0"']


def test_export_filename():
    from datetime import date

    assert export_filename(date(2024, 1, 26)) == "staff_stats_2024-01-26.csv"
