"""Health-check payload for the API."""

from edchoice.core.award import PROGRAM_YEAR


def get_ping_message() -> str:
    return "pong"


def get_ping_payload() -> dict[str, str]:
    """Report liveness together with the award schedule being served."""
    return {"message": get_ping_message(), "programYear": PROGRAM_YEAR}
