"""Weekly gross pay calculation.

SDK layer - pure logic, no prompting or retries.

Pay bands (hours per week):
- under 40:      hours * rate * 0.7
- exactly 40:    hours * rate
- (40, 50]:      40 * rate + overtime hours at 1.5x
- (50, 60]:      40 * rate + 10 hours at 1.5x + hours over 50 at 3x

Hours outside [0, 60] and non-positive rates are rejected.
"""

import logging
import math

from .schemas import PayBand, SalaryResult

logger = logging.getLogger(__name__)

MIN_HOURS = 0.0
STANDARD_HOURS = 40.0
OVERTIME_THRESHOLD = 50.0
MAX_HOURS = 60.0

REDUCED_RATE = 0.7
OVERTIME_RATE = 1.5
HEAVY_OVERTIME_RATE = 3.0


class PayrollInputError(ValueError):
    """Raised for hours or rates that cannot be used in a calculation."""
    pass


def validate_hours(hours: float) -> bool:
    """True if hours is within [0, 60], inclusive at both ends."""
    return MIN_HOURS <= hours <= MAX_HOURS


def validate_rate(rate: float) -> bool:
    """True if the hourly rate is strictly positive and finite."""
    return math.isfinite(rate) and rate > 0


def pay_band(hours: float) -> PayBand:
    """Identify the formula segment for a number of hours."""
    if hours < STANDARD_HOURS:
        return PayBand.REDUCED
    if hours == STANDARD_HOURS:
        return PayBand.STANDARD
    if hours <= OVERTIME_THRESHOLD:
        return PayBand.OVERTIME
    return PayBand.HEAVY_OVERTIME


def calculate_salary(hours: float, rate: float) -> float:
    """Compute gross weekly pay.

    Callers must validate hours and rate first; results for values
    outside the valid ranges are not meaningful.

    Args:
        hours: Hours worked in the week, within [0, 60]
        rate: Hourly pay rate, greater than 0

    Returns:
        Gross pay for the week
    """
    if hours < STANDARD_HOURS:
        return hours * rate * REDUCED_RATE

    # Exactly 40 is its own rule, not the first point of the overtime band
    if hours == STANDARD_HOURS:
        return hours * rate

    if hours <= OVERTIME_THRESHOLD:
        return (STANDARD_HOURS * rate
                + (hours - STANDARD_HOURS) * rate * OVERTIME_RATE)

    return (STANDARD_HOURS * rate
            + (OVERTIME_THRESHOLD - STANDARD_HOURS) * rate * OVERTIME_RATE
            + (hours - OVERTIME_THRESHOLD) * rate * HEAVY_OVERTIME_RATE)


def compute_pay(hours: float, rate: float) -> SalaryResult:
    """Validate inputs and return the full salary result.

    Raises:
        PayrollInputError: If hours or rate is out of range
    """
    if not validate_hours(hours):
        raise PayrollInputError(
            f"Hours must be between {MIN_HOURS:g} and {MAX_HOURS:g}, got {hours:g}"
        )
    if not validate_rate(rate):
        raise PayrollInputError(f"Hourly rate must be a positive finite number, got {rate:g}")

    band = pay_band(hours)
    salary = calculate_salary(hours, rate)
    if not math.isfinite(salary):
        raise PayrollInputError(
            f"Pay for {hours:g}h at {rate:g}/h is too large to compute"
        )
    logger.debug(f"salary for {hours:g}h at {rate:g}/h ({band.value}): {salary:.2f}")

    return SalaryResult(hours=hours, hourly_rate=rate, band=band, salary=salary)


def parse_number(text: str) -> float:
    """Parse one line of user input as a real number.

    Surrounding whitespace is ignored. Anything else that float() would
    not accept as a finite number is rejected.

    Raises:
        PayrollInputError: If the text is empty, not numeric, NaN or infinite
    """
    stripped = (text or "").strip()
    if not stripped:
        raise PayrollInputError("Input must be a number")

    try:
        value = float(stripped)
    except ValueError:
        raise PayrollInputError(f"Input must be a number, got '{stripped}'")

    if not math.isfinite(value):
        raise PayrollInputError(f"Input must be a finite number, got '{stripped}'")

    return value


def describe_bands() -> list[dict]:
    """Describe each pay band for display.

    Returns:
        List of dicts with band, hours range, rule text, and the hours
        value used for an example (the band's upper bound)
    """
    return [
        {
            "band": PayBand.REDUCED,
            "hours": f"[{MIN_HOURS:g}, {STANDARD_HOURS:g})",
            "rule": f"all hours at {REDUCED_RATE:g}x",
            "example_hours": STANDARD_HOURS - 1,
        },
        {
            "band": PayBand.STANDARD,
            "hours": f"{STANDARD_HOURS:g}",
            "rule": "all hours at 1x",
            "example_hours": STANDARD_HOURS,
        },
        {
            "band": PayBand.OVERTIME,
            "hours": f"({STANDARD_HOURS:g}, {OVERTIME_THRESHOLD:g}]",
            "rule": f"{STANDARD_HOURS:g}h at 1x, rest at {OVERTIME_RATE:g}x",
            "example_hours": OVERTIME_THRESHOLD,
        },
        {
            "band": PayBand.HEAVY_OVERTIME,
            "hours": f"({OVERTIME_THRESHOLD:g}, {MAX_HOURS:g}]",
            "rule": (f"{STANDARD_HOURS:g}h at 1x, "
                     f"{OVERTIME_THRESHOLD - STANDARD_HOURS:g}h at {OVERTIME_RATE:g}x, "
                     f"rest at {HEAVY_OVERTIME_RATE:g}x"),
            "example_hours": MAX_HOURS,
        },
    ]
