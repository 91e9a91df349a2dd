"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from edchoice.core.award import explain_award
from edchoice.core.errors import InvalidInputError
from edchoice.core.ping import get_ping_payload
from edchoice.schemas.award import AwardEstimate, parse_award_input
from edchoice.schemas.ping import PingResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected award input: %d error(s)", exc.error_count())
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(InvalidInputError)
def _handle_invalid_input(exc: InvalidInputError):
    logger.warning("award input outside estimator domain: %s", exc)
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse.model_validate(get_ping_payload())
    return jsonify(response.model_dump())


@api_bp.post("/calc/award")
def award() -> Any:
    """Estimate the K-8 and 9-12 awards for one household."""
    raw_payload = request.get_json(silent=True)
    if not isinstance(raw_payload, dict):
        return (
            jsonify({"detail": "Request body must be a JSON object"}),
            HTTPStatus.BAD_REQUEST,
        )

    award_input = parse_award_input(raw_payload)
    breakdown = explain_award(award_input.agi, award_input.household_size)
    response = AwardEstimate.from_breakdown(breakdown)
    logger.info(
        "award estimate: household_size=%d award_ratio=%.4f",
        award_input.household_size,
        breakdown.award_ratio,
    )
    return jsonify(response.model_dump()), HTTPStatus.OK
