import logging

import pytest

from mnemonic16 import config


def write(tmp_path, text):
    path = tmp_path / "config.toml"
    path.write_text(text)
    return path


def test_defaults(tmp_path):
    cfg = config.load(write(tmp_path, ""))
    assert cfg == config.DEFAULT_CONFIG
    assert cfg.byte_format == "hex"
    assert cfg.abbreviated is False
    assert cfg.get_log_level() == logging.CRITICAL


def test_load(tmp_path):
    cfg = config.load(write(tmp_path, '[default]\nformat = "base64"\nabbreviated = true\nlog_level = "debug"\n'))
    assert cfg.byte_format == "base64"
    assert cfg.abbreviated is True
    assert cfg.log_level == "DEBUG"
    assert cfg.get_log_level() == logging.DEBUG


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        config.load(tmp_path / "missing.toml")


@pytest.mark.parametrize(
    "text",
    [
        'format = "hex"\n',
        "[other]\n",
        '[default]\nformat = "octal"\n',
        '[default]\nabbreviated = "yes"\n',
        '[default]\nlog_level = "loud"\n',
        "[default]\nunknown = 1\n",
    ],
)
def test_invalid(tmp_path, text):
    with pytest.raises(ValueError):
        config.load(write(tmp_path, text))
