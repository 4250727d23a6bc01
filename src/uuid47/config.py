"""Configuration for the uuid47 gateway.

Reads from config/uuid47.ini if present, environment variables override.
The codec key is a secret: keep it out of version control.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "uuid47.ini"


@dataclass(frozen=True)
class Uuid47Config:
    """Gateway configuration. Immutable once loaded.

    codec_key is the 32-hex-digit form of a Key (see uuid47.key). Empty
    means a random key per process.
    """

    codec_key: str = ""
    api_key: str = ""
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


_INI_KEYS = [
    ("codec", "key", "codec_key"),
    ("gateway", "api_key", "api_key"),
    ("gateway", "host", "host"),
    ("gateway", "port", "port"),
    ("logging", "level", "log_level"),
]

_ENV_MAP = {
    "UUID47_KEY": "codec_key",
    "UUID47_API_KEY": "api_key",
    "UUID47_HOST": "host",
    "UUID47_PORT": "port",
    "UUID47_LOG_LEVEL": "log_level",
}


def load_config(config_path: Path | None = None) -> Uuid47Config:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        for section, ini_key, config_key in _INI_KEYS:
            if parser.has_section(section):
                val = parser.get(section, ini_key, fallback=None)
                if val is not None:
                    kwargs[config_key] = val

    for env_key, config_key in _ENV_MAP.items():
        val = os.getenv(env_key)
        if val is not None:
            kwargs[config_key] = val

    if "port" in kwargs:
        kwargs["port"] = int(kwargs["port"])
    if "log_level" in kwargs:
        kwargs["log_level"] = kwargs["log_level"].upper()
    return Uuid47Config(**kwargs)
