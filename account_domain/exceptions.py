"""Custom exception hierarchy for account-domain.

Invalid account *input* is never raised; it comes back as an
``Invalid`` validation result. These exceptions cover configuration,
repository and generation failures.
"""


class AccountDomainError(Exception):
    """Base exception for all account-domain errors."""


class ConfigurationError(AccountDomainError):
    """Raised when configuration is invalid or missing."""


class RepositoryError(AccountDomainError):
    """Raised when an account repository operation fails."""


class DuplicateAccountError(RepositoryError):
    """Raised when storing an account whose number is already taken."""


class AccountNumberGenerationError(AccountDomainError):
    """Raised when a unique account number could not be produced."""
