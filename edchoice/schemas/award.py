"""Data contracts for award estimates."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from edchoice.core.award import AwardBreakdown
from edchoice.core.formatting import DISCLAIMER, format_award


class AwardInput(BaseModel):
    """Validated household figures; numeric strings are coerced."""

    model_config = ConfigDict(populate_by_name=True)

    agi: float = Field(
        ...,
        allow_inf_nan=False,
        description="Adjusted gross income: line 11 of the federal return or line 3 of the Ohio return.",
    )
    household_size: int = Field(
        ...,
        alias="householdSize",
        description="Tax filers, spouses, and dependents listed on the tax returns.",
    )

    @field_validator("agi")
    @classmethod
    def _agi_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("AGI must be a positive number")
        return value

    @field_validator("household_size")
    @classmethod
    def _household_size_positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Household size must be a positive integer")
        return value


def parse_award_input(raw: Mapping[str, Any]) -> AwardInput:
    """Validate raw form or JSON values; raises pydantic.ValidationError."""
    return AwardInput.model_validate(dict(raw))


class AwardDisplay(BaseModel):
    k8: str
    high: str


class AwardEstimate(BaseModel):
    """Award estimate as returned by the API."""

    model_config = ConfigDict(extra="forbid")

    fplRatio: float = Field(..., ge=0)
    awardRatio: float = Field(..., ge=0, le=1)
    k8: float = Field(..., ge=0)
    high: float = Field(..., ge=0)
    display: AwardDisplay
    disclaimer: str = DISCLAIMER

    @classmethod
    def from_breakdown(cls, breakdown: AwardBreakdown) -> "AwardEstimate":
        amounts = breakdown.amounts
        return cls(
            fplRatio=breakdown.fpl_ratio,
            awardRatio=breakdown.award_ratio,
            k8=amounts.k8,
            high=amounts.high,
            display=AwardDisplay(
                k8=format_award(amounts.k8),
                high=format_award(amounts.high),
            ),
        )
