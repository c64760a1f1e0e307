"""Configuration management for account-domain."""

import os
from dataclasses import dataclass, field

from account_domain.exceptions import ConfigurationError
from account_domain.models.enums import Strategy
from account_domain.validation.fields import MIN_ACCOUNT_NO_LENGTH


@dataclass
class GeneratorConfig:
    """Unique account-number generator configuration.

    ``max_attempts`` and ``timeout_seconds`` of ``None`` leave the retry
    loop unbounded.
    """

    length: int = 10
    max_attempts: int | None = None
    timeout_seconds: float | None = None
    strict: bool = False
    locale: str = "en_US"

    def __post_init__(self) -> None:
        if self.length < MIN_ACCOUNT_NO_LENGTH:
            raise ConfigurationError(
                f"Generated account numbers must be at least {MIN_ACCOUNT_NO_LENGTH} "
                f"characters, got {self.length}"
            )
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ConfigurationError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigurationError(
                f"timeout_seconds must be > 0, got {self.timeout_seconds}"
            )


@dataclass
class AccountDomainConfig:
    """Main configuration for account-domain."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    strategy: Strategy = Strategy.ACCUMULATING
    seed: int | None = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AccountDomainConfig":
        """Create config from environment variables."""
        strategy_name = os.getenv("ACCOUNT_STRATEGY", Strategy.ACCUMULATING.value)
        try:
            strategy = Strategy(strategy_name.lower())
        except ValueError:
            choices = ", ".join(s.value for s in Strategy)
            raise ConfigurationError(
                f"Unknown ACCOUNT_STRATEGY {strategy_name!r}; expected one of: {choices}"
            ) from None

        max_attempts = os.getenv("ACCOUNT_NO_MAX_ATTEMPTS")
        timeout = os.getenv("ACCOUNT_NO_TIMEOUT")

        generator = GeneratorConfig(
            length=int(os.getenv("ACCOUNT_NO_LENGTH", "10")),
            max_attempts=int(max_attempts) if max_attempts else None,
            timeout_seconds=float(timeout) if timeout else None,
            strict=os.getenv("ACCOUNT_NO_STRICT", "false").lower() == "true",
            locale=os.getenv("FAKER_LOCALE", "en_US"),
        )

        return cls(
            generator=generator,
            strategy=strategy,
            seed=int(os.getenv("SEED")) if os.getenv("SEED") else None,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
