from __future__ import annotations

import logging
import pathlib
import tomllib

from typing import NamedTuple

from .types import ByteFormat


CONFIG_DIRECTORY = pathlib.Path("~/.mnemonic16").expanduser()
CONFIG_PATH = CONFIG_DIRECTORY / "config.toml"

DEFAULT_BYTE_FORMAT: ByteFormat = "hex"
DEFAULT_ABBREVIATED = False
DEFAULT_LOG_LEVEL = "CRITICAL"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(NamedTuple):
    byte_format: ByteFormat
    abbreviated: bool
    log_level: str

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load(path: pathlib.Path = CONFIG_PATH) -> Config:
    """Load the configuration from the given configuration file. Example:

    [default]
    format = "base64"
    abbreviated = true
    log_level = "DEBUG"
    """
    with open(path, "rb") as f:
        byte_format = DEFAULT_BYTE_FORMAT
        abbreviated = DEFAULT_ABBREVIATED
        log_level = DEFAULT_LOG_LEVEL

        for key, value in tomllib.load(f).items():
            if key != "default":
                raise ValueError(f"Invalid configuration key {key!r}.")
            if not isinstance(value, dict):
                raise ValueError(f"Error in configuration file near [{key}].")

            for subkey, value in value.items():
                if subkey == "format":
                    if value not in ByteFormat.__args__:
                        raise ValueError(f"Invalid byte format {value!r}.")
                    byte_format = value
                elif subkey == "abbreviated":
                    if not isinstance(value, bool):
                        raise ValueError(f"Invalid value {value!r} for 'abbreviated', expected true or false.")
                    abbreviated = value
                elif subkey == "log_level":
                    if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                        raise ValueError(f"Invalid log level {value!r}.")
                    log_level = value.upper()
                else:
                    raise ValueError(f"Invalid configuration key {subkey!r}.")

        return Config(byte_format, abbreviated, log_level)


DEFAULT_CONFIG = Config(DEFAULT_BYTE_FORMAT, DEFAULT_ABBREVIATED, DEFAULT_LOG_LEVEL)
