"""Pay Desk SDK - Login validation and payroll calculation."""

from .config import (
    get_config_dir,
    get_profile_path,
    load_profile,
    load_credentials,
    describe_credentials_source,
    configure_logging,
    ProfileError,
    DEFAULT_CREDENTIALS,
)

from .schemas import (
    Credentials,
    PayBand,
    SalaryResult,
)

from .login import (
    LoginOutcome,
    LoginState,
    LoginBuffers,
    LoginSession,
    LoginSessionClosedError,
    validate_login,
    apply_outcome,
    outcome_message,
    cleared_note,
    MAX_ATTEMPTS,
)

from .payroll import (
    validate_hours,
    validate_rate,
    calculate_salary,
    compute_pay,
    pay_band,
    parse_number,
    describe_bands,
    PayrollInputError,
    MAX_HOURS,
)

from .menu import (
    MenuOption,
    parse_menu_choice,
    invalid_menu_message,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_profile_path",
    "load_profile",
    "load_credentials",
    "describe_credentials_source",
    "configure_logging",
    "ProfileError",
    "DEFAULT_CREDENTIALS",
    # Schemas
    "Credentials",
    "PayBand",
    "SalaryResult",
    # Login
    "LoginOutcome",
    "LoginState",
    "LoginBuffers",
    "LoginSession",
    "LoginSessionClosedError",
    "validate_login",
    "apply_outcome",
    "outcome_message",
    "cleared_note",
    "MAX_ATTEMPTS",
    # Payroll
    "validate_hours",
    "validate_rate",
    "calculate_salary",
    "compute_pay",
    "pay_band",
    "parse_number",
    "describe_bands",
    "PayrollInputError",
    "MAX_HOURS",
    # Menu
    "MenuOption",
    "parse_menu_choice",
    "invalid_menu_message",
]
