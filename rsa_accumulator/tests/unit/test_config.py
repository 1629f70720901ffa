"""
Unit Tests for Configuration and Logging Setup
"""

import json
import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from rsa_accumulator.accumulator import RSAAccumulator, verify_membership
from rsa_accumulator.config import Settings, get_settings
from rsa_accumulator.logging_config import CustomJsonFormatter, setup_logging
from rsa_accumulator.rsa_params import DEFAULT_G, DEFAULT_N


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest left it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    """Test configuration settings and environment variable loading."""

    def test_default_settings(self):
        settings = Settings(_env_file=None)

        assert settings.n_hex is None
        assert settings.g_hex is None
        assert settings.params_file is None
        assert settings.min_modulus_bits == 0
        assert settings.log_level == "INFO"
        assert settings.log_format == "json"
        assert settings.app_name == "rsa-accumulator"

    @patch.dict(os.environ, {
        'ACCUMULATOR_LOG_LEVEL': 'debug',
        'ACCUMULATOR_LOG_FORMAT': 'TEXT',
        'ACCUMULATOR_MIN_MODULUS_BITS': '2048',
    })
    def test_environment_variable_override(self):
        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "text"
        assert settings.min_modulus_bits == 2048

    @patch.dict(os.environ, {'ACCUMULATOR_LOG_FORMAT': 'yaml'})
    def test_invalid_log_format(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @patch.dict(os.environ, {'ACCUMULATOR_MIN_MODULUS_BITS': '-1'})
    def test_negative_min_bits(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ACCUMULATOR_N_HEX=0xd1\nACCUMULATOR_G_HEX=0x9\n")

        settings = Settings(_env_file=str(env_file))

        assert settings.n_hex == "0xd1"
        assert settings.g_hex == "0x9"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestFromSettings:
    """Test building an accumulator from configuration."""

    def test_defaults(self):
        acc = RSAAccumulator.from_settings(Settings(_env_file=None))
        assert acc.modulus == DEFAULT_N
        assert acc.get_a0() == DEFAULT_G

    @patch.dict(os.environ, {'ACCUMULATOR_N_HEX': '0xd1', 'ACCUMULATOR_G_HEX': '0x4'})
    def test_environment(self):
        acc = RSAAccumulator.from_settings()
        assert acc.modulus == 209
        assert acc.get_a0() == 4

    @patch.dict(os.environ, {'ACCUMULATOR_N_HEX': '0xd1', 'ACCUMULATOR_G_HEX': '0x9'})
    def test_configured_modulus_proofs_verify(self):
        acc = RSAAccumulator.from_settings()
        for x in (13, 17, 23):
            acc.add(x)

        for x in (13, 17, 23):
            proof = acc.prove_membership(x)
            assert RSAAccumulator.verify_membership(acc.commitment, proof, N=acc.modulus)
            assert verify_membership(acc.commitment, proof, 209)


class TestLogging:
    """Test logging configuration."""

    def test_json_format(self, restore_root_logger):
        handler = setup_logging(Settings(_env_file=None, log_level="DEBUG", app_version="9.9.9"))

        assert isinstance(handler.formatter, CustomJsonFormatter)
        assert logging.getLogger().level == logging.DEBUG

        record = logging.LogRecord("rsa_accumulator.test", logging.INFO, __file__, 1, "hello", None, None)
        payload = json.loads(handler.formatter.format(record))

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["service"] == "rsa-accumulator"
        assert payload["version"] == "9.9.9"
        assert payload["timestamp"].endswith("Z")

    def test_text_format(self, restore_root_logger):
        handler = setup_logging(Settings(_env_file=None, log_format="text", log_level="warning"))

        assert not isinstance(handler.formatter, CustomJsonFormatter)
        assert logging.getLogger().level == logging.WARNING

        record = logging.LogRecord("rsa_accumulator.test", logging.WARNING, __file__, 1, "careful", None, None)
        assert "rsa_accumulator.test - WARNING - careful" in handler.formatter.format(record)

    def test_rejected_element_logged(self, toy_accumulator, caplog):
        with caplog.at_level(logging.WARNING, logger="rsa_accumulator.accumulator"):
            with pytest.raises(ValueError):
                toy_accumulator.add(11)

        assert "Rejected element" in caplog.text
