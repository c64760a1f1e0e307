"""Enumeration types for account-domain entities."""

from enum import Enum


class Currency(str, Enum):
    USD = "USD"
    JPY = "JPY"
    AUD = "AUD"
    INR = "INR"


class AccountKind(str, Enum):
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"


class ErrorKind(str, Enum):
    INVALID_ACCOUNT_NUMBER = "INVALID_ACCOUNT_NUMBER"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_RATE = "INVALID_RATE"


class Strategy(str, Enum):
    """How field validations are combined into an account."""

    ACCUMULATING = "accumulating"
    NON_ACCUMULATING = "non_accumulating"
    FAIL_FAST = "fail_fast"
