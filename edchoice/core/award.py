"""EdChoice Expansion award estimate.

Award amounts scale with household income relative to the federal poverty
level (FPL). Households at or below 450% FPL receive the full award; above
that the award decays exponentially, never dropping below 10% of the maximum.
"""

from __future__ import annotations

import logging
import math
import sys

from pydantic import BaseModel, ConfigDict

from edchoice.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

PROGRAM_YEAR = "FY26"

# 2025 HHS poverty guidelines, 48 contiguous states:
# threshold = FPL_BASE + FPL_PER_PERSON * household size
FPL_BASE = 10150
FPL_PER_PERSON = 5500

# FY26 award schedule
FULL_AWARD_FPL_RATIO = 4.5
DECAY_BASE = 0.5
MIN_AWARD_RATIO = 0.1
MAX_AWARD_K8 = 6166
MAX_AWARD_HIGH = 8408


class AwardAmounts(BaseModel):
    """Estimated award per student for each grade band."""

    model_config = ConfigDict(frozen=True)

    k8: float
    high: float


class AwardBreakdown(BaseModel):
    """Award amounts along with the ratios they were derived from."""

    model_config = ConfigDict(frozen=True)

    fpl_ratio: float
    award_ratio: float
    amounts: AwardAmounts


def calculate_fpl_ratio(agi: float, household_size: int) -> float:
    """Return income as a multiple of the poverty threshold for the household."""
    threshold = FPL_BASE + FPL_PER_PERSON * household_size
    if threshold > sys.float_info.max:
        # finite agi over a threshold past the float range is zero
        return 0.0
    return agi / threshold


def calculate_award_ratio(fpl_ratio: float) -> float:
    """
    Fraction of the maximum award for a given FPL ratio.

    At or below FULL_AWARD_FPL_RATIO the full award applies. Above it:

        ratio = (1/c)^4.5 * e^(ln(c) * fpl_ratio)

    which equals 1.0 at 4.5 and halves for each additional 100% FPL,
    floored at MIN_AWARD_RATIO.
    """
    if fpl_ratio <= FULL_AWARD_FPL_RATIO:
        return 1.0

    decayed = math.pow(1 / DECAY_BASE, FULL_AWARD_FPL_RATIO) * math.exp(
        math.log(DECAY_BASE) * fpl_ratio
    )
    return max(MIN_AWARD_RATIO, decayed)


def _check_inputs(agi: float, household_size: int) -> None:
    errors: list[str] = []
    if isinstance(agi, bool) or not isinstance(agi, (int, float)):
        errors.append("AGI must be a number")
    elif agi > sys.float_info.max or not math.isfinite(agi):
        errors.append("AGI must be a finite number")
    elif agi <= 0:
        errors.append("AGI must be a positive number")

    if isinstance(household_size, bool) or not isinstance(household_size, int):
        errors.append("Household size must be a positive integer")
    elif household_size < 1:
        errors.append("Household size must be a positive integer")

    if errors:
        raise InvalidInputError(errors)


def explain_award(agi: float, household_size: int) -> AwardBreakdown:
    """
    Compute the award estimate and keep the intermediate ratios.

    Steps:
      1. FPL ratio = agi / (FPL_BASE + FPL_PER_PERSON * household_size)
      2. Award ratio from the FY26 decay curve
      3. Each grade-band maximum * award ratio, rounded to cents

    Raises InvalidInputError for a non-positive AGI or a household size
    that is not an integer >= 1.
    """
    _check_inputs(agi, household_size)

    fpl_ratio = calculate_fpl_ratio(agi, household_size)
    award_ratio = calculate_award_ratio(fpl_ratio)
    logger.debug(
        "household_size=%d fpl_ratio=%.4f award_ratio=%.6f",
        household_size,
        fpl_ratio,
        award_ratio,
    )

    amounts = AwardAmounts(
        k8=round(MAX_AWARD_K8 * award_ratio, 2),
        high=round(MAX_AWARD_HIGH * award_ratio, 2),
    )
    return AwardBreakdown(fpl_ratio=fpl_ratio, award_ratio=award_ratio, amounts=amounts)


def estimate_award(agi: float, household_size: int) -> AwardAmounts:
    """Return the estimated K-8 and 9-12 awards for a household."""
    return explain_award(agi, household_size).amounts
