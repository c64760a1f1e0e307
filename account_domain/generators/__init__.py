"""Random value generators."""

from account_domain.generators.account_number import AccountNumberGenerator, Candidate

__all__ = ["AccountNumberGenerator", "Candidate"]
