# tests/test_financial.py

"""
Tests for investment / quote aggregation helpers.
"""

from core.financial import (
    UNLINKED_GROUP,
    budget_for_year,
    expand_cycle,
    filter_investments,
    group_quotes_by_investment,
    quote_totals,
    sort_investments,
    total_for_year,
    year_totals,
)


def investment(id, title="Dak", years=None, **extra):
    return {"id": id, "title": title, "years": years or [], **extra}


ROOF = investment("i1", "3 Dak", [{"year": 2025, "amount": 10000}, {"year": 2026, "amount": 2500}])
WINDOWS = investment("i2", "12 Kozijnen", [{"year": 2025, "amount": 4000}])
PAINT = investment("i3", "Schilderwerk", [{"year": 2027, "amount": 1500}])


def test_budget_for_year():
    assert budget_for_year(ROOF, 2025) == 10000
    assert budget_for_year(ROOF, 2030) is None
    assert budget_for_year({"id": "x"}, 2025) is None


def test_totals():
    assert total_for_year([ROOF, WINDOWS, PAINT], 2025) == 14000
    assert year_totals([ROOF, WINDOWS, PAINT], 2025, 2027) == {2025: 14000, 2026: 2500, 2027: 1500}


def test_year_totals_accepts_generators():
    totals = year_totals((inv for inv in [ROOF, WINDOWS]), 2025, 2026)
    assert totals == {2025: 14000, 2026: 2500}


def test_expand_cycle_from_start_date():
    inv = investment("c1", is_cyclic=True, cycle_years=5, start_date="2024-06-01T00:00:00")
    assert expand_cycle(inv, 2040) == [2024, 2029, 2034, 2039]


def test_expand_cycle_from_first_budget_year():
    inv = investment("c2", is_cyclic=True, cycle_years=2, years=[{"year": 2027, "amount": 1}, {"year": 2026, "amount": 1}])
    assert expand_cycle(inv, 2030) == [2026, 2028, 2030]


def test_expand_cycle_non_cyclic_or_invalid():
    assert expand_cycle(investment("n1", is_cyclic=False, cycle_years=3, start_date="2024-01-01"), 2030) == []
    assert expand_cycle(investment("n2", is_cyclic=True, cycle_years=0, start_date="2024-01-01"), 2030) == []
    assert expand_cycle(investment("n3", is_cyclic=True, cycle_years=4), 2030) == []


def test_sort_investments_numbered_first():
    result = sort_investments([PAINT, WINDOWS, ROOF, investment("i4", "Aanbouw")])
    assert [inv["title"] for inv in result] == ["3 Dak", "12 Kozijnen", "Aanbouw", "Schilderwerk"]


def test_filter_investments():
    rows = [
        investment("a", category="dak", status="gepland"),
        investment("b", category="dak", status="gereed"),
        investment("c", category="installaties", status="gepland"),
    ]
    assert [r["id"] for r in filter_investments(rows, category="dak")] == ["a", "b"]
    assert [r["id"] for r in filter_investments(rows, status="gepland")] == ["a", "c"]
    assert [r["id"] for r in filter_investments(rows)] == ["a", "b", "c"]


def test_group_quotes_by_investment():
    quotes = [
        {"id": "q1", "investment_id": "i1"},
        {"id": "q2", "investment_id": None},
        {"id": "q3", "investment_id": "elsewhere"},
    ]
    groups = group_quotes_by_investment([ROOF, WINDOWS], quotes)

    assert [q["id"] for q in groups["i1"]["quotes"]] == ["q1"]
    assert groups["i2"]["quotes"] == []
    assert [q["id"] for q in groups[UNLINKED_GROUP]["quotes"]] == ["q2"]
    assert "elsewhere" not in groups


def test_group_quotes_without_unlinked():
    groups = group_quotes_by_investment([ROOF], [{"id": "q1", "investment_id": "i1"}])
    assert UNLINKED_GROUP not in groups


def test_quote_totals():
    quotes = [
        {"status": "accepted", "quoted_amount": 1000},
        {"status": "accepted", "quoted_amount": 500},
        {"status": None, "quoted_amount": 200},
        {"status": "rejected", "quoted_amount": None},
    ]
    assert quote_totals(quotes) == {"accepted": 1500, "draft": 200, "rejected": 0}
