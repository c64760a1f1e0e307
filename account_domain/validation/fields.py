"""Field validators, one invariant each."""

import logging
from datetime import date
from decimal import Decimal

from account_domain.models.enums import ErrorKind
from account_domain.validation.result import Invalid, Valid, ValidationResult

logger = logging.getLogger(__name__)

MIN_ACCOUNT_NO_LENGTH = 5


def validate_account_no(no: str) -> ValidationResult[str]:
    """Account number must be at least ``MIN_ACCOUNT_NO_LENGTH`` characters."""
    if not no or len(no) < MIN_ACCOUNT_NO_LENGTH:
        logger.debug("Rejected account number %r", no)
        return Invalid.of(
            ErrorKind.INVALID_ACCOUNT_NUMBER,
            f"Account No has to be at least {MIN_ACCOUNT_NO_LENGTH} characters long: found {no}",
        )
    return Valid(no)


def validate_open_close_date(
    open_date: date,
    close_date: date | None = None,
) -> ValidationResult[tuple[date, date | None]]:
    """Close date, when given, must not precede the open date."""
    if close_date is not None and close_date < open_date:
        logger.debug("Rejected date range %s -> %s", open_date, close_date)
        return Invalid.of(
            ErrorKind.INVALID_DATE_RANGE,
            f"Close date [{close_date}] cannot be earlier than open date [{open_date}]",
        )
    return Valid((open_date, close_date))


def validate_rate(rate: Decimal | float | int) -> ValidationResult[Decimal]:
    """Interest rate must be strictly positive; NaN is rejected."""
    value = rate if isinstance(rate, Decimal) else Decimal(str(rate))
    if value.is_nan() or value <= 0:
        logger.debug("Rejected interest rate %s", rate)
        return Invalid.of(ErrorKind.INVALID_RATE, f"Interest rate {rate} must be > 0")
    return Valid(value)
