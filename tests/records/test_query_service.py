from __future__ import annotations

from timecard.employees.roster import Roster
from timecard.records.model import MonthlyTotals
from timecard.records.service import RecordQueryService

from ..fakes import make_record


def _seed(repo):
    repo.save(
        [
            make_record("a", "2024-03-15", "13:00", "18:00", break_minutes=0),
            make_record("b", "2024-02-29"),
            make_record("c", "2024-03-01", "10:00", "19:00"),
            make_record("d", "2024-03-15", "09:00", "12:00", break_minutes=0, employee_id="e2", employee_name="佐藤花子"),
            make_record("e", "2024-04-01"),
            make_record("f", "2024-03-31", "09:00", "10:00", break_minutes=120, overtime_minutes=15),
            make_record("g", "2023-03-10"),
        ]
    )


def test_month_filter_and_sort_order(repo, roster):
    _seed(repo)
    svc = RecordQueryService(repo, roster)

    rows = svc.get_records_by_month("2024-03", "all")

    assert [r.id for r in rows] == ["c", "d", "a", "f"]
    assert all(r.date.startswith("2024-03") for r in rows)


def test_month_boundaries_are_not_shifted(repo, roster):
    repo.save([make_record("x", "2024-03-01"), make_record("y", "2024-03-31"), make_record("z", "2024-02-29")])

    rows = RecordQueryService(repo, roster).get_records_by_month("2024-03", "all")

    assert [r.id for r in rows] == ["x", "y"]


def test_employee_filter(repo, roster):
    _seed(repo)
    svc = RecordQueryService(repo, roster)

    assert [r.id for r in svc.get_records_by_month("2024-03", "e2")] == ["d"]
    assert svc.get_records_by_month("2024-03", "nobody") == []


def test_bad_month_values_return_empty(repo, roster):
    _seed(repo)
    svc = RecordQueryService(repo, roster)

    for month in ("", None, "2024", "March-2024"):
        assert svc.get_records_by_month(month, "all") == []
        assert svc.get_monthly_summary(month, "all") == []
        assert svc.get_monthly_totals(month, "all") == MonthlyTotals()


def test_summary_rows_carry_work_minutes_in_order(repo, roster):
    _seed(repo)
    svc = RecordQueryService(repo, roster)

    summary = svc.get_monthly_summary("2024-03", "all")

    assert [(s.date, s.start, s.work_minutes) for s in summary] == [
        ("2024-03-01", "10:00", 480),
        ("2024-03-15", "09:00", 180),
        ("2024-03-15", "13:00", 300),
        ("2024-03-31", "09:00", -1),
    ]
    assert summary[1].employee_name == "佐藤花子"
    assert not summary[3].has_work_minutes


def test_monthly_totals_skip_invalid_days(repo, roster):
    _seed(repo)

    totals = RecordQueryService(repo, roster).get_monthly_totals("2024-03", "all")

    assert totals == MonthlyTotals(days=4, work_minutes=960, overtime_minutes=15, invalid_days=1)


def test_summary_title(repo):
    single = RecordQueryService(repo, Roster({"e1": "三島理絵"}))
    many = RecordQueryService(repo, Roster({"e1": "三島理絵", "e2": "佐藤花子"}))

    assert single.summary_title("all") == "三島理絵 さんの月次集計"
    assert many.summary_title("all") == "月次集計"
    assert many.summary_title("e2") == "佐藤花子 さんの月次集計"
    assert RecordQueryService(repo).summary_title("e1") == "月次集計"
