"""Display strings for award results."""

from __future__ import annotations

NOT_ELIGIBLE = "Not Eligible"
DISCLAIMER = "These amounts are estimates and may change after official verification"

GRADE_BAND_LABELS = {
    "k8": "Grades K-8",
    "high": "Grades 9-12",
}


def format_currency(amount: float) -> str:
    """$6,166 for whole dollars, $2,733.17 otherwise."""
    cents = round(amount * 100)
    if cents % 100 == 0:
        return f"${cents // 100:,}"
    return f"${amount:,.2f}"


def format_award(amount: float) -> str:
    # a zero amount is shown as ineligible; the estimator itself never returns one
    if not amount:
        return NOT_ELIGIBLE
    return format_currency(amount)
