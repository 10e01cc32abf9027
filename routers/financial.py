# routers/financial.py

from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from core.financial import (
    expand_cycle,
    filter_investments,
    group_quotes_by_investment,
    quote_totals,
    sort_investments,
    year_totals,
)
from core.logging_config import logger
from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import (
    select_rows,
    insert_row,
    insert_rows,
    update_row,
    delete_row,
    delete_where,
)
from dependencies.auth import CurrentUser
from models.enums import InvestmentStatus
from models.investment import InvestmentCreate, InvestmentUpdate, QuoteCreate, QuoteUpdate


INVESTMENTS_TABLE = "investments"
YEARS_TABLE = "investment_years"
QUOTES_TABLE = "quotes"

MAX_YEAR_SPAN = 30

router = APIRouter(tags=["Financial"])

guard = requires_page(PageKey.financieel)


# ============================================================
# HELPERS
# ============================================================
def resolve_year_range(start_year: Optional[int], end_year: Optional[int]) -> tuple[int, int]:
    """
    A missing bound takes the other one; with neither, the current year.
    Rejects inverted or oversized ranges.
    """
    start = start_year or end_year or date.today().year
    end = end_year or start
    if end < start:
        raise HTTPException(400, "endYear must not be before startYear")
    if end - start > MAX_YEAR_SPAN:
        raise HTTPException(400, f"Year range may span at most {MAX_YEAR_SPAN} years")
    return start, end


def load_investments(school_id: str) -> list[dict]:
    """Investments of a school with their ``years`` rows attached."""
    investments = select_rows(INVESTMENTS_TABLE, {"school_id": school_id}, order="created_at")
    if not investments:
        return []

    years = select_rows(YEARS_TABLE, in_filters={"investment_id": [inv["id"] for inv in investments]})
    by_investment: dict[str, list[dict]] = {}
    for row in years:
        by_investment.setdefault(row["investment_id"], []).append(row)

    for inv in investments:
        inv["years"] = sorted(by_investment.get(inv["id"], []), key=lambda r: r["year"])
    return investments


def in_year_range(investment: dict, start: int, end: int) -> bool:
    """Budgeted in range, recurring into range, or not budgeted at all yet."""
    budget_years = [row["year"] for row in investment.get("years") or []]
    if not budget_years:
        return True
    if any(start <= year <= end for year in budget_years):
        return True
    return any(start <= year <= end for year in expand_cycle(investment, end))


def quote_year(quote: dict) -> Optional[int]:
    value = quote.get("quote_date") or quote.get("created_at")
    if isinstance(value, str) and value[:4].isdigit():
        return int(value[:4])
    return None


def build_financial_summary(school_id: str, start: int, end: int) -> dict:
    """Numbers behind the financieel page and the dashboard financieel tab."""
    investments = [inv for inv in load_investments(school_id) if in_year_range(inv, start, end)]
    quotes = select_rows(QUOTES_TABLE, {"school_id": school_id})

    groups = group_quotes_by_investment(investments, quotes)

    return {
        "start_year": start,
        "end_year": end,
        "year_totals": year_totals(investments, start, end),
        "investment_count": len(investments),
        "open_investments": len([
            inv for inv in investments if inv.get("status") != InvestmentStatus.gereed.value
        ]),
        "quote_totals": quote_totals(quotes),
        "quotes_per_investment": {key: len(group["quotes"]) for key, group in groups.items()},
        "cycles": {
            inv["id"]: [y for y in expand_cycle(inv, end) if y >= start]
            for inv in investments
            if inv.get("is_cyclic")
        },
    }


def replace_years(investment_id: str, years: list[dict]):
    """
    Swap all budget rows of an investment. PostgREST has no transaction here,
    so the previous rows are put back when the insert fails.
    """
    rows = [{"investment_id": investment_id, "year": y["year"], "amount": y["amount"]} for y in years]
    if len({row["year"] for row in rows}) != len(rows):
        raise HTTPException(400, "Each year may appear only once")

    previous = select_rows(YEARS_TABLE, {"investment_id": investment_id}, columns="investment_id,year,amount")
    delete_where(YEARS_TABLE, {"investment_id": investment_id}, "Investment years")

    try:
        insert_rows(YEARS_TABLE, rows, "Investment years")
    except HTTPException:
        logger.error(f"Restoring {len(previous)} budget rows of investment {investment_id}")
        insert_rows(YEARS_TABLE, previous, "Investment years")
        raise


# ============================================================
# INVESTMENTS
# ============================================================
@router.get(
    "/investments",
    summary="List investments with yearly budgets",
    description="""
    **Permissions:** Requires the `financieel` page and access to the school.

    Returns investments budgeted (or recurring) within `startYear`..`endYear`,
    sorted by the leading number in their title, plus per-year totals.
    """,
)
def list_investments(
    school_id: str = Query(..., alias="schoolId"),
    start_year: Optional[int] = Query(None, alias="startYear"),
    end_year: Optional[int] = Query(None, alias="endYear"),
    category: Optional[str] = None,
    status: Optional[InvestmentStatus] = None,
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    start, end = resolve_year_range(start_year, end_year)

    investments = [inv for inv in load_investments(school_id) if in_year_range(inv, start, end)]
    investments = filter_investments(investments, category=category, status=status.value if status else None)
    investments = sort_investments(investments)

    return {
        "success": True,
        "data": investments,
        "totals": year_totals(investments, start, end),
    }


@router.post("/investments", summary="Create an investment", status_code=201)
def create_investment(payload: InvestmentCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)

    data = payload.model_dump(mode="json", exclude={"years"})
    investment = insert_row(INVESTMENTS_TABLE, data, "Investment")

    years = [y.model_dump() for y in payload.years]
    if years:
        replace_years(investment["id"], years)
    investment["years"] = sorted(years, key=lambda r: r["year"])

    logger.info(f"Investment {investment['id']} created by {current_user.id}")
    return investment


@router.patch("/investments/{investment_id}", summary="Update an investment")
def update_investment(
    investment_id: str,
    payload: InvestmentUpdate,
    current_user: CurrentUser = Depends(guard),
):
    existing = load_school_row(current_user, INVESTMENTS_TABLE, investment_id, "Investment")

    changes = payload.model_dump(mode="json", exclude_unset=True, exclude={"years"})
    if changes.get("is_cyclic") is False:
        changes["cycle_years"] = None
    elif changes.get("is_cyclic") and not (changes.get("cycle_years") or existing.get("cycle_years")):
        raise HTTPException(400, "cycle_years must be at least 1 for cyclic investments")

    investment = update_row(INVESTMENTS_TABLE, investment_id, changes, "Investment") if changes else existing

    if payload.years is not None:
        replace_years(investment_id, [y.model_dump() for y in payload.years])

    investment["years"] = select_rows(YEARS_TABLE, {"investment_id": investment_id}, order="year")
    return investment


@router.delete("/investments/{investment_id}", summary="Delete an investment")
def delete_investment(investment_id: str, current_user: CurrentUser = Depends(guard)):
    """Year rows and linked quotes cascade in the database."""
    load_school_row(current_user, INVESTMENTS_TABLE, investment_id, "Investment")
    delete_row(INVESTMENTS_TABLE, investment_id, "Investment")
    return {"success": True}


# ============================================================
# QUOTES (offertes)
# ============================================================
@router.get("/quotes", summary="List quotes")
def list_quotes(
    school_id: str = Query(..., alias="schoolId"),
    start_year: Optional[int] = Query(None, alias="startYear"),
    end_year: Optional[int] = Query(None, alias="endYear"),
    investment_id: Optional[str] = Query(None, alias="investmentId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)

    quotes = select_rows(
        QUOTES_TABLE,
        {"school_id": school_id, "investment_id": investment_id},
        order="quote_date",
        desc=True,
    )

    if start_year or end_year:
        start, end = resolve_year_range(start_year, end_year)
        quotes = [q for q in quotes if quote_year(q) is not None and start <= quote_year(q) <= end]

    return {"success": True, "data": quotes}


@router.post("/quotes", summary="Create a quote", status_code=201)
def create_quote(payload: QuoteCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)

    if payload.investment_id:
        investment = load_school_row(current_user, INVESTMENTS_TABLE, payload.investment_id, "Investment")
        if investment.get("school_id") != payload.school_id:
            raise HTTPException(400, "Investment belongs to a different school")

    return insert_row(QUOTES_TABLE, payload.model_dump(mode="json"), "Quote")


@router.patch("/quotes/{quote_id}", summary="Update a quote")
def update_quote(quote_id: str, payload: QuoteUpdate, current_user: CurrentUser = Depends(guard)):
    quote = load_school_row(current_user, QUOTES_TABLE, quote_id, "Quote")
    changes = payload.model_dump(mode="json", exclude_unset=True)

    if changes.get("investment_id"):
        investment = load_school_row(current_user, INVESTMENTS_TABLE, changes["investment_id"], "Investment")
        if investment.get("school_id") != quote.get("school_id"):
            raise HTTPException(400, "Investment belongs to a different school")

    return update_row(QUOTES_TABLE, quote_id, changes, "Quote")


@router.delete("/quotes/{quote_id}", summary="Delete a quote")
def delete_quote(quote_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, QUOTES_TABLE, quote_id, "Quote")
    delete_row(QUOTES_TABLE, quote_id, "Quote")
    return {"success": True}


# ============================================================
# SUMMARY
# ============================================================
@router.get("/financial/summary", summary="Budget and quote totals for a school")
def financial_summary(
    school_id: str = Query(..., alias="schoolId"),
    start_year: Optional[int] = Query(None, alias="startYear"),
    end_year: Optional[int] = Query(None, alias="endYear"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    start, end = resolve_year_range(start_year, end_year)
    return {"success": True, "data": build_financial_summary(school_id, start, end)}
