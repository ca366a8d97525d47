"""
Tests for the core package: errors, shared types, settings and logging.
"""

import json
import logging

import pytest

from utilkit.core import (
    ErrorCode, UtilkitError, ValidationError, ConfigurationError,
    OperationTimeoutError, RGB, RetryOptions, CatchResult, Settings,
    get_config_value, get_bool_config, get_int_config, get_float_config,
    configure_logging
)
from utilkit.core.log import PACKAGE_LOGGER


class TestErrors:
    """Test the error hierarchy."""

    def test_base_error(self):
        """Test base error fields and formatting."""
        cause = ValueError("bad")
        error = UtilkitError("Something failed", details={'key': 'value'}, cause=cause)

        assert error.error_code == ErrorCode.INTERNAL_ERROR
        assert str(error) == "internal_error: Something failed"
        assert error.to_dict() == {
            'error': 'internal_error',
            'message': 'Something failed',
            'details': {'key': 'value'},
            'cause': 'bad'
        }

    def test_validation_error(self):
        """Test validation error details."""
        error = ValidationError("retries must be >= 0", field="retries", value=-1)

        assert isinstance(error, UtilkitError)
        assert error.error_code == ErrorCode.VALIDATION_FAILED
        assert error.details == {'field': 'retries', 'value': '-1'}

    def test_configuration_error(self):
        """Test configuration error details."""
        error = ConfigurationError("Invalid setting", config_key="log_level", config_value="LOUD")

        assert error.error_code == ErrorCode.CONFIGURATION_ERROR
        assert error.details['config_key'] == "log_level"
        assert error.details['config_value'] == "LOUD"

    def test_timeout_error_is_builtin_timeout(self):
        """Test the timeout error can be caught as TimeoutError."""
        error = OperationTimeoutError("Timed out after 50ms", timeout_ms=50)

        assert isinstance(error, TimeoutError)
        assert error.error_code == ErrorCode.TIMEOUT
        assert error.timeout_ms == 50
        assert error.details['timeout_ms'] == 50
        assert error.message == "Timed out after 50ms"

    def test_every_code_has_an_error_class(self):
        """Test each error code is carried by exactly one error class."""
        raised = {
            UtilkitError("x").error_code,
            ValidationError("x").error_code,
            ConfigurationError("x").error_code,
            OperationTimeoutError("x").error_code,
        }

        assert raised == set(ErrorCode)
        assert str(ErrorCode.TIMEOUT) == "timeout"


class TestTypes:
    """Test shared value types."""

    def test_rgb(self):
        """Test RGB is immutable and converts to a dict."""
        color = RGB(255, 85, 51)

        assert color.as_dict() == {'r': 255, 'g': 85, 'b': 51}
        with pytest.raises(AttributeError):
            color.r = 0

    def test_retry_options_defaults(self):
        """Test retry option defaults and wait times."""
        options = RetryOptions()

        assert options.retries == 3
        assert options.delay == 1000
        assert options.backoff is False
        assert options.wait_for(0) == 1000
        assert options.wait_for(2) == 1000

    def test_retry_options_backoff(self):
        """Test exponential backoff uses the attempt index."""
        options = RetryOptions(delay=100, backoff=True)

        assert [options.wait_for(i) for i in range(4)] == [100, 200, 400, 800]

    def test_retry_options_validation(self):
        """Test negative values are rejected."""
        with pytest.raises(ValidationError):
            RetryOptions(retries=-1)
        with pytest.raises(ValidationError):
            RetryOptions(delay=-5)

    def test_catch_result_to_dict(self):
        """Test catch result serialization."""
        error = KeyError("x")

        assert CatchResult(ok=True, data=42).to_dict() == {'ok': True, 'data': 42}
        assert CatchResult(ok=False, error=error).to_dict() == {'ok': False, 'error': error}


class TestConfigHelpers:
    """Test environment configuration helpers."""

    def test_get_config_value(self, monkeypatch):
        """Test reading a prefixed environment variable."""
        monkeypatch.setenv("UTILKIT_NAME", "demo")

        assert get_config_value("name") == "demo"
        assert get_config_value("missing", "fallback") == "fallback"

    def test_typed_helpers(self, monkeypatch):
        """Test typed environment helpers."""
        monkeypatch.setenv("UTILKIT_FLAG", "yes")
        monkeypatch.setenv("UTILKIT_COUNT", "7")
        monkeypatch.setenv("UTILKIT_RATIO", "0.5")

        assert get_bool_config("flag") is True
        assert get_int_config("count") == 7
        assert get_float_config("ratio") == 0.5

    def test_invalid_value_falls_back(self, monkeypatch, caplog):
        """Test an unparsable value logs a warning and returns the default."""
        monkeypatch.setenv("UTILKIT_COUNT", "seven")

        with caplog.at_level(logging.WARNING, logger="utilkit.core.config"):
            assert get_int_config("count", 3) == 3
        assert "UTILKIT_COUNT" in caplog.text


class TestSettings:
    """Test settings loading and validation."""

    def test_defaults(self):
        """Test default settings."""
        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.retry_retries == 3
        assert settings.id_length == 16
        assert settings.slug_length == 64
        assert settings.validate() is True

    def test_from_env(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("UTILKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("UTILKIT_RETRY_RETRIES", "5")
        monkeypatch.setenv("UTILKIT_RETRY_BACKOFF", "true")

        settings = Settings.from_env()

        assert settings.log_level == "DEBUG"
        assert settings.retry_retries == 5
        assert settings.retry_backoff is True
        assert settings.retry_delay_ms == 1000

    def test_from_dict_ignores_unknown_keys(self, caplog):
        """Test unknown keys are dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="utilkit.core.config"):
            settings = Settings.from_dict({'id_length': 8, 'colour': 'blue'})

        assert settings.id_length == 8
        assert "colour" in caplog.text

    def test_from_json_file(self, tmp_path):
        """Test loading settings from a JSON file."""
        path = tmp_path / "utilkit.json"
        path.write_text(json.dumps({'retry_retries': 1, 'retry_delay_ms': 10}))

        settings = Settings.from_file(path)

        assert settings.retry_retries == 1
        assert settings.retry_delay_ms == 10

    def test_from_yaml_file(self, tmp_path):
        """Test loading settings from a YAML file."""
        path = tmp_path / "utilkit.yaml"
        path.write_text("log_level: INFO\nbytes_decimals: 1\n")

        settings = Settings.from_file(str(path))

        assert settings.log_level == "INFO"
        assert settings.bytes_decimals == 1

    def test_empty_yaml_file(self, tmp_path):
        """Test an empty file yields default settings."""
        path = tmp_path / "empty.yml"
        path.write_text("")

        assert Settings.from_file(path) == Settings()

    def test_file_errors(self, tmp_path):
        """Test missing, unsupported, malformed and non-mapping files."""
        with pytest.raises(ConfigurationError):
            Settings.from_file(tmp_path / "missing.json")

        toml = tmp_path / "utilkit.toml"
        toml.write_text("a = 1")
        with pytest.raises(ConfigurationError):
            Settings.from_file(toml)

        broken = tmp_path / "broken.json"
        broken.write_text("{not json")
        with pytest.raises(ConfigurationError) as exc_info:
            Settings.from_file(broken)
        assert exc_info.value.cause is not None

        listing = tmp_path / "list.yaml"
        listing.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            Settings.from_file(listing)

    def test_validate_collects_errors(self):
        """Test validation reports every problem at once."""
        settings = Settings(log_level="LOUD", retry_retries=-1, slug_length=-2)

        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate()

        errors = exc_info.value.details['errors']
        assert len(errors) == 3
        assert exc_info.value.error_code == ErrorCode.CONFIGURATION_ERROR

    def test_retry_options(self):
        """Test building retry options from settings."""
        options = Settings(retry_retries=2, retry_delay_ms=50, retry_backoff=True).retry_options()

        assert options == RetryOptions(retries=2, delay=50, backoff=True)


class TestLogging:
    """Test logging configuration."""

    def test_configure_logging_replaces_handler(self):
        """Test repeated configuration does not stack handlers."""
        log = configure_logging("debug")
        configure_logging(logging.INFO)

        ours = [h for h in log.handlers if getattr(h, '_utilkit_handler', False)]
        assert log.name == PACKAGE_LOGGER
        assert len(ours) == 1
        assert log.level == logging.INFO

        log.removeHandler(ours[0])
        log.setLevel(logging.NOTSET)


class TestPackage:
    """Test the top-level package."""

    def test_exports(self):
        """Test version and subpackage exports."""
        import utilkit

        assert utilkit.__version__ == "0.1.0"
        assert utilkit.text.to_snake_case("helloWorld") == "hello_world"
        assert utilkit.numeric.format_bytes(1024) == "1 KB"
        assert utilkit.slugify("Hello World") == "hello-world"
        assert utilkit.is_equal([1], [1]) is True
        assert len(utilkit.__all__) == len(set(utilkit.__all__))

    def test_library_logger_is_silent_by_default(self):
        """Test a NullHandler is installed on the package logger."""
        log = logging.getLogger(PACKAGE_LOGGER)

        assert any(isinstance(h, logging.NullHandler) for h in log.handlers)
