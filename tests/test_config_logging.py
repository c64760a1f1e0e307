"""Tests for config and logging."""

import json
import logging
import sys
from collections.abc import Iterator
from decimal import Decimal

import pytest

from account_domain.config import AccountDomainConfig, GeneratorConfig
from account_domain.exceptions import ConfigurationError
from account_domain.factory import AccountFactory
from account_domain.generators import AccountNumberGenerator
from account_domain.logging import JsonFormatter, setup_logging
from account_domain.models.enums import Strategy
from account_domain.store.accounts import InMemoryAccountRepository

ENV_VARS = [
    "ACCOUNT_STRATEGY",
    "ACCOUNT_NO_LENGTH",
    "ACCOUNT_NO_MAX_ATTEMPTS",
    "ACCOUNT_NO_TIMEOUT",
    "ACCOUNT_NO_STRICT",
    "FAKER_LOCALE",
    "SEED",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("account_domain").setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Clear all config environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestGeneratorConfig:
    """Tests for GeneratorConfig."""

    def test_default_values(self) -> None:
        config = GeneratorConfig()

        assert config.length == 10
        assert config.max_attempts is None
        assert config.timeout_seconds is None
        assert config.strict is False
        assert config.locale == "en_US"

    def test_custom_values(self) -> None:
        config = GeneratorConfig(length=12, max_attempts=100, timeout_seconds=2.0, strict=True)

        assert config.length == 12
        assert config.max_attempts == 100
        assert config.timeout_seconds == 2.0
        assert config.strict is True

    @pytest.mark.parametrize(
        "kwargs",
        [{"length": 4}, {"max_attempts": 0}, {"timeout_seconds": 0}, {"timeout_seconds": -1.0}],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        with pytest.raises(ConfigurationError):
            GeneratorConfig(**kwargs)


class TestAccountDomainConfig:
    """Tests for AccountDomainConfig."""

    def test_default_values(self) -> None:
        config = AccountDomainConfig()

        assert isinstance(config.generator, GeneratorConfig)
        assert config.strategy == Strategy.ACCUMULATING
        assert config.seed is None
        assert config.log_level == "INFO"

    def test_from_env_default(self, clean_env: pytest.MonkeyPatch) -> None:
        config = AccountDomainConfig.from_env()

        assert config == AccountDomainConfig()

    def test_from_env_custom(self, clean_env: pytest.MonkeyPatch) -> None:
        env = {
            "ACCOUNT_STRATEGY": "FAIL_FAST",
            "ACCOUNT_NO_LENGTH": "12",
            "ACCOUNT_NO_MAX_ATTEMPTS": "50",
            "ACCOUNT_NO_TIMEOUT": "0.5",
            "ACCOUNT_NO_STRICT": "true",
            "FAKER_LOCALE": "en_GB",
            "SEED": "12345",
            "LOG_LEVEL": "DEBUG",
        }
        for name, value in env.items():
            clean_env.setenv(name, value)

        config = AccountDomainConfig.from_env()

        assert config.strategy == Strategy.FAIL_FAST
        assert config.generator.length == 12
        assert config.generator.max_attempts == 50
        assert config.generator.timeout_seconds == 0.5
        assert config.generator.strict is True
        assert config.generator.locale == "en_GB"
        assert config.seed == 12345
        assert config.log_level == "DEBUG"

    def test_from_env_unknown_strategy(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ACCOUNT_STRATEGY", "optimistic")

        with pytest.raises(ConfigurationError, match="optimistic"):
            AccountDomainConfig.from_env()

    def test_from_env_invalid_length(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ACCOUNT_NO_LENGTH", "3")

        with pytest.raises(ConfigurationError):
            AccountDomainConfig.from_env()


class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_levels(self) -> None:
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("account_domain").level == logging.DEBUG
        assert logging.getLogger("faker").level == logging.WARNING

    def test_invalid_level_falls_back_to_info(self) -> None:
        setup_logging(level="LOUD")

        assert logging.getLogger().level == logging.INFO

    def test_single_handler_with_chosen_format(self) -> None:
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())

        setup_logging(format_type="json")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)


class TestJsonFormatter:
    """JSON output carries the account context attached by log calls."""

    @pytest.fixture
    def records(self) -> Iterator[list[logging.LogRecord]]:
        captured: list[logging.LogRecord] = []
        handler = logging.Handler()
        handler.emit = captured.append  # type: ignore[method-assign]
        logger = logging.getLogger("account_domain")
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        yield captured
        logger.removeHandler(handler)

    def test_factory_rejection(self, records: list[logging.LogRecord]) -> None:
        AccountFactory(Strategy.ACCUMULATING).savings_account("AC", "Jane", Decimal(-1))

        data = json.loads(JsonFormatter().format(records[-1]))

        assert data["level"] == "WARNING"
        assert data["logger"] == "account_domain.factory"
        assert data["account_no"] == "AC"
        assert data["account_kind"] == "savings"
        assert data["strategy"] == "accumulating"
        assert data["error_kinds"] == ["INVALID_ACCOUNT_NUMBER", "INVALID_RATE"]

    def test_factory_creation(self, records: list[logging.LogRecord]) -> None:
        AccountFactory(Strategy.FAIL_FAST).checking_account("AC001", "John")

        data = json.loads(JsonFormatter().format(records[-1]))

        assert data["message"] == "Created checking account AC001"
        assert data["strategy"] == "fail_fast"
        assert "error_kinds" not in data

    def test_generator_attempts(
        self, records: list[logging.LogRecord], repository: InMemoryAccountRepository
    ) -> None:
        number = AccountNumberGenerator(repository, seed=7).generate()

        data = json.loads(JsonFormatter().format(records[-1]))

        assert data["account_no"] == number
        assert data["attempts"] == 1

    def test_no_context_fields_without_extra(self) -> None:
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", (), None)

        data = json.loads(JsonFormatter().format(record))

        assert set(data) == {"timestamp", "level", "logger", "message"}

    def test_exception(self) -> None:
        try:
            raise ValueError("lookup failed")
        except ValueError:
            exc_info = sys.exc_info()
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", (), exc_info)

        data = json.loads(JsonFormatter().format(record))

        assert "ValueError: lookup failed" in data["exception"]


class TestPackageInit:
    """Tests for account_domain __init__.py."""

    def test_version_exported(self) -> None:
        from account_domain import __version__

        assert isinstance(__version__, str)

    def test_public_api(self) -> None:
        import account_domain

        assert account_domain.AccountFactory().strategy == account_domain.Strategy.ACCUMULATING
