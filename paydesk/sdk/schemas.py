"""Pydantic schemas for Pay Desk data validation.

All schemas use extra='forbid' to reject unknown fields, ensuring
typos in profile.yaml cause clear errors rather than silent ignoring.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


# Fits a 32-byte input buffer including the terminator
CREDENTIAL_MAX_LENGTH = 31


class Credentials(BaseModel):
    """The single valid username/password pair. Immutable once loaded."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    username: str = Field(
        ..., min_length=1, max_length=CREDENTIAL_MAX_LENGTH,
        pattern=r"^[A-Za-z]+$",
        description="Login name, ASCII letters only",
    )
    password: str = Field(
        ..., min_length=1, max_length=CREDENTIAL_MAX_LENGTH,
        pattern=r"^[0-9]+$",
        description="Login password, ASCII digits only",
    )


class PayBand(str, Enum):
    """Which segment of the weekly pay formula applies."""

    REDUCED = "reduced"                  # under 40h, 0.7x
    STANDARD = "standard"                # exactly 40h, 1x
    OVERTIME = "overtime"                # (40, 50], 1.5x over 40
    HEAVY_OVERTIME = "heavy_overtime"    # (50, 60], 3x over 50


class SalaryResult(BaseModel):
    """Gross weekly pay with the inputs it was derived from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    hours: float = Field(..., ge=0, le=60, description="Weekly hours worked")
    hourly_rate: float = Field(..., gt=0, description="Pay per hour")
    band: PayBand = Field(..., description="Formula segment used")
    salary: float = Field(..., ge=0, description="Gross pay for the week")
