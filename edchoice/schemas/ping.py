"""Pydantic schema for the health-check endpoint."""

from pydantic import BaseModel, ConfigDict


class PingResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str
    programYear: str
