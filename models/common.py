# models/common.py

from typing import Annotated, List

from pydantic import StringConstraints


# Whitespace is stripped first, so "   " is rejected like "".
# Update models use it for columns that are NOT NULL in the database.
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


def check_unique_years(rows: List) -> List:
    """Reject budget rows that repeat a year (investment_years is unique per year)."""
    years = [row.year for row in rows]
    if len(years) != len(set(years)):
        raise ValueError("Each year may appear only once")
    return rows
