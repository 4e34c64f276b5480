from datetime import date

from risk_register.config import AppConfig
from risk_register.services.classification import (
    budget_by_area,
    classify_quadrants,
    compliance_score,
    critical_count,
    dashboard_metrics,
    dashboard_snapshot,
    filter_items,
    is_overdue,
    priority_investments,
    quick_wins,
    status_distribution,
    strategic_planning,
    upcoming_deadlines,
)


def test_quadrant_predicates(make_item):
    items = [
        make_item("1", urgency="Immediate", cost=12000),
        make_item("2", urgency="ShortTerm", cost=5000),
        make_item("3", urgency="ShortTerm", cost=5000.01),
        make_item("4", urgency="MidTerm", cost=100),
        make_item("5", urgency="LongTerm", cost=90000),
    ]
    assert [i.id for i in priority_investments(items)] == ["1", "3"]
    assert [i.id for i in quick_wins(items)] == ["2"]
    assert [i.id for i in strategic_planning(items)] == ["4", "5"]


def test_no_item_is_both_investment_and_quick_win(make_item):
    items = [make_item(str(c), urgency=u, cost=c) for c in (0, 4999, 5000, 5001, 80000) for u in ("Immediate", "ShortTerm")]
    buckets = classify_quadrants(items)
    invest = {i.id + i.urgency for i in buckets["priority_investments"]}
    wins = {i.id + i.urgency for i in buckets["quick_wins"]}
    assert invest.isdisjoint(wins)
    assert len(invest) + len(wins) == len(items)


def test_unknown_urgency_matches_no_bucket(make_item):
    buckets = classify_quadrants([make_item(urgency="Eventually")])
    assert all(members == [] for members in buckets.values())


def test_custom_threshold(make_item):
    items = [make_item(urgency="Immediate", cost=3000)]
    assert priority_investments(items, threshold=2500) == items


def test_compliance_score_example(make_item):
    statuses = ["Completed", "Completed", "InProgress", "NotStarted"]
    items = [make_item(str(i), status=s) for i, s in enumerate(statuses)]
    assert compliance_score(items) == 50


def test_compliance_score_rounds_half_up(make_item):
    items = [make_item("0", status="Completed")] + [make_item(str(i)) for i in range(1, 8)]
    assert compliance_score(items) == 13


def test_compliance_score_empty_collection():
    assert compliance_score([]) is None
    metrics = dashboard_metrics([])
    assert metrics.compliance_score is None
    assert metrics.total_budget == 0


def test_dashboard_metrics(make_item):
    items = [
        make_item("1", priority=1, cost=100, status="Completed"),
        make_item("2", priority=1, cost=250.5),
        make_item("3", priority=3, cost=0),
    ]
    metrics = dashboard_metrics(items)
    assert metrics.to_dict() == {
        "complianceScore": 33,
        "totalBudget": 350.5,
        "criticalCount": 2,
        "completedCount": 1,
    }
    assert critical_count(items) == 2


def test_status_distribution(make_item):
    items = [make_item("1", status="Completed"), make_item("2", status="InProgress"), make_item("3", status="Completed")]
    assert [(d["name"], d["value"]) for d in status_distribution(items)] == [
        ("NotStarted", 0),
        ("InProgress", 1),
        ("Completed", 2),
    ]


def test_budget_by_area_keeps_first_seen_order(make_item):
    items = [
        make_item("1", area="Systems", cost=100),
        make_item("2", area="Documentation", cost=50),
        make_item("3", area="Systems", cost=25),
    ]
    assert list(budget_by_area(items).items()) == [("Systems", 125), ("Documentation", 50)]


def test_upcoming_deadlines_example(make_item):
    a = make_item("A", deadline=date(2025, 1, 10), status="InProgress")
    b = make_item("B", deadline=date(2025, 1, 5), status="Completed")
    c = make_item("C", deadline=date(2025, 2, 1), status="NotStarted")
    assert [i.id for i in upcoming_deadlines([a, b, c])] == ["A", "C"]


def test_upcoming_deadlines_stable_and_truncated(make_item):
    items = [make_item(str(i), deadline=date(2025, 3, 1)) for i in range(4)]
    items.insert(2, make_item("early", deadline=date(2025, 1, 1)))
    items.append(make_item("late", deadline=date(2026, 1, 1)))
    assert [i.id for i in upcoming_deadlines(items)] == ["early", "0", "1", "2", "3"]


def test_filter_items(make_item):
    items = [
        make_item("1", priority=1, area="Systems", status="NotStarted"),
        make_item("2", priority=1, area="Structural", status="Completed"),
        make_item("3", priority=2, area="Systems", status="NotStarted"),
    ]
    assert [i.id for i in filter_items(items, priority=1)] == ["1", "2"]
    assert [i.id for i in filter_items(items, area="Systems", status="NotStarted")] == ["1", "3"]
    assert filter_items(items) == items


def test_is_overdue(make_item):
    item = make_item(deadline=date(2025, 1, 10))
    assert is_overdue(item, date(2025, 1, 11))
    assert not is_overdue(item, date(2025, 1, 10))


def test_dashboard_snapshot(make_item):
    items = [
        make_item("1", area="Systems", cost=10, deadline=date(2025, 1, 1)),
        make_item("2", area="Insurance", cost=20, status="Completed"),
    ]
    snapshot = dashboard_snapshot(items, AppConfig(), today=date(2025, 6, 1))
    assert snapshot["isEmpty"] is False
    assert snapshot["metrics"]["complianceScore"] == 50
    assert snapshot["budgetByArea"] == [{"name": "Systems", "cost": 10}, {"name": "Insurance", "cost": 20}]
    assert [d["id"] for d in snapshot["upcomingDeadlines"]] == ["1"]
    assert snapshot["upcomingDeadlines"][0]["overdue"] is True


def test_dashboard_snapshot_empty():
    snapshot = dashboard_snapshot([], AppConfig())
    assert snapshot["isEmpty"] is True
    assert snapshot["metrics"]["complianceScore"] is None
