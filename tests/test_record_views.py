"""
Tests for role-scoped record views.
"""

from __future__ import annotations

from dataclasses import fields
from zoneinfo import ZoneInfo

from rollshop.application.use_cases.record_views import filter_records_for_view
from rollshop.domain.entities.record_view import FullRecordView, PublicRollSummary, Role, StaffRecordView


def test_manager_sees_every_record_unchanged(make_record):
    records = [make_record(staff_id="Mira"), make_record(staff_id="Kai")]
    views = filter_records_for_view(records, Role.MANAGER)
    assert all(isinstance(v, FullRecordView) for v in views)
    assert [v.record for v in views] == records


def test_staff_sees_only_own_records(make_record):
    records = [make_record(staff_id="Mira"), make_record(staff_id="mira"), make_record(staff_id="Kai")]
    views = filter_records_for_view(records, Role.STAFF, "Mira")
    assert len(views) == 1
    [view] = views
    assert isinstance(view, StaffRecordView)
    assert view.staff_id == "Mira"
    assert view.id == records[0].id
    assert view.time == "2024/01/26 06:05:09"


def test_staff_time_uses_business_timezone(make_record):
    [view] = filter_records_for_view([make_record()], Role.STAFF, "Mira", ZoneInfo("Asia/Shanghai"))
    assert view.time == "2024/01/26 14:05:09"


def test_staff_without_viewer_id_sees_nothing(make_record):
    assert filter_records_for_view([make_record()], Role.STAFF) == []


def test_guest_summary_exposes_only_joined_strings(make_record):
    record = make_record(rolls=(("Alice", 672), ("Bob", 127)), money=300)
    [view] = filter_records_for_view([record], Role.GUEST, tz=ZoneInfo("Asia/Shanghai"))

    assert isinstance(view, PublicRollSummary)
    assert view.transaction_time == "14:05"
    assert view.customer_rolls == "Alice(672)、Bob(127)"
    assert view.selected == "Bob(127)"
    assert view.money == 300
    names = {f.name for f in fields(view)}
    assert "id" not in names
    assert "customers" not in names


def test_role_accepts_plain_strings(make_record):
    views = filter_records_for_view([make_record()], "guest")
    assert isinstance(views[0], PublicRollSummary)
