import logging

import pytest

from clustercert.common.config import Config


def test_config_cli_defaults() -> None:
    config = Config()
    assert config.CA_CRT_PATH == "ca.crt"
    assert config.CA_KEY_PATH == "ca.key"
    assert config.KEY_SIZE == 4096  # noqa: PLR2004
    assert config.OUT_CRT_PATH == "cluster.crt"
    assert config.OUT_KEY_PATH == "cluster.key"


def test_config_issuance_constants() -> None:
    config = Config()
    assert config.VALIDITY_YEARS == 10  # noqa: PLR2004
    assert config.RSA_PUBLIC_EXPONENT == 65537  # noqa: PLR2004
    assert config.SIGNATURE_HASH == "sha512"
    assert config.OUTPUT_FILE_MODE == 0o644


def test_config_log_level_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CLUSTERCERT_LOG_LEVEL", raising=False)
    assert Config().LOG_LEVEL == logging.INFO


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), (" WARNING ", logging.WARNING), ("15", 15)],
)
def test_config_log_level_from_env(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int
) -> None:
    monkeypatch.setenv("CLUSTERCERT_LOG_LEVEL", raw)
    assert Config().LOG_LEVEL == expected


def test_config_invalid_log_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("CLUSTERCERT_LOG_LEVEL", "chatty")
    caplog.set_level(logging.WARNING, logger="clustercert")

    assert Config().LOG_LEVEL == logging.INFO
    assert "Invalid log level 'chatty', using INFO" in caplog.text
