# core/financial.py

"""
Aggregations over investment and quote rows as returned by Supabase.

Investments carry their per-year budgets in ``years``:
    {"id": ..., "title": ..., "is_cyclic": bool, "cycle_years": int | None,
     "start_date": "2025-03-01T00:00:00", "years": [{"year": 2025, "amount": 12000}]}
"""

import re
from datetime import date, datetime
from typing import Iterable, Optional


_LEADING_NUMBER = re.compile(r"^(\d+)")

UNLINKED_GROUP = "unlinked"


def budget_for_year(investment: dict, year: int) -> Optional[int]:
    for row in investment.get("years") or []:
        if row.get("year") == year:
            return row.get("amount")
    return None


def total_for_year(investments: Iterable[dict], year: int) -> int:
    return sum(budget_for_year(inv, year) or 0 for inv in investments)


def year_totals(investments: Iterable[dict], start_year: int, end_year: int) -> dict[int, int]:
    investments = list(investments)
    return {year: total_for_year(investments, year) for year in range(start_year, end_year + 1)}


def _year_of(value) -> Optional[int]:
    if isinstance(value, (date, datetime)):
        return value.year
    if isinstance(value, str) and len(value) >= 4 and value[:4].isdigit():
        return int(value[:4])
    return None


def expand_cycle(investment: dict, end_year: int) -> list[int]:
    """
    Recurrence years of a cyclic investment up to ``end_year`` inclusive.

    The cycle is anchored on the start date, or on the first budget year
    when no start date is set. Non-cyclic rows return [].
    """
    if not investment.get("is_cyclic"):
        return []

    cycle = investment.get("cycle_years")
    if not isinstance(cycle, int) or cycle < 1:
        return []

    anchor = _year_of(investment.get("start_date"))
    if anchor is None:
        budget_years = [row.get("year") for row in investment.get("years") or [] if row.get("year")]
        if not budget_years:
            return []
        anchor = min(budget_years)

    return list(range(anchor, end_year + 1, cycle))


def _leading_number(title: Optional[str]) -> Optional[int]:
    match = _LEADING_NUMBER.match(title or "")
    return int(match.group(1)) if match else None


def sort_investments(investments: Iterable[dict]) -> list[dict]:
    """Numbered titles first ("3 Dak", "12 Kozijnen"), numerically; then by title."""

    def key(inv: dict):
        number = _leading_number(inv.get("title"))
        if number is not None:
            return (0, number, inv.get("title") or "")
        return (1, 0, inv.get("title") or "")

    return sorted(investments, key=key)


def filter_investments(
    investments: Iterable[dict],
    category: Optional[str] = None,
    status: Optional[str] = None,
) -> list[dict]:
    result = []
    for inv in investments:
        if category and inv.get("category") != category:
            continue
        if status and inv.get("status") != status:
            continue
        result.append(inv)
    return result


def group_quotes_by_investment(investments: Iterable[dict], quotes: Iterable[dict]) -> dict[str, dict]:
    """
    {investment_id: {"investment": inv, "quotes": [...]}} for every investment,
    plus an "unlinked" group when quotes without an investment exist.
    Quotes pointing at an investment outside ``investments`` are dropped.
    """
    quotes = list(quotes)
    groups: dict[str, dict] = {}

    for inv in investments:
        groups[inv["id"]] = {
            "investment": inv,
            "quotes": [q for q in quotes if q.get("investment_id") == inv["id"]],
        }

    unlinked = [q for q in quotes if not q.get("investment_id")]
    if unlinked:
        groups[UNLINKED_GROUP] = {"investment": None, "quotes": unlinked}

    return groups


def quote_totals(quotes: Iterable[dict]) -> dict[str, int]:
    """Sum of quoted_amount per quote status."""
    totals: dict[str, int] = {}
    for quote in quotes:
        status = quote.get("status") or "draft"
        totals[status] = totals.get(status, 0) + (quote.get("quoted_amount") or 0)
    return totals
