"""Field validation and composition strategies."""

from account_domain.validation.fields import (
    MIN_ACCOUNT_NO_LENGTH,
    validate_account_no,
    validate_open_close_date,
    validate_rate,
)
from account_domain.validation.result import (
    Invalid,
    Valid,
    ValidationError,
    ValidationResult,
    accumulate,
    first_failure,
)
from account_domain.validation.strategies import (
    AccountValidator,
    FailFast,
    FailSlowAccumulating,
    FailSlowNonAccumulating,
    get_validator,
)

__all__ = [
    "MIN_ACCOUNT_NO_LENGTH",
    "AccountValidator",
    "FailFast",
    "FailSlowAccumulating",
    "FailSlowNonAccumulating",
    "Invalid",
    "Valid",
    "ValidationError",
    "ValidationResult",
    "accumulate",
    "first_failure",
    "get_validator",
    "validate_account_no",
    "validate_open_close_date",
    "validate_rate",
]
