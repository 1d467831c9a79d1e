# infrastructure/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

ENV_PREFIX = "WEBAPI_"


class SettingsError(Exception):
    pass


@dataclass(frozen=True)
class Settings:
    base_url: str = ""
    timeout_sec: int = 20
    log_level: str = "INFO"
    config_file: str = ""


def load_settings(env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Read WEBAPI_* settings. Values from the process environment win over
    the .env file.
    """
    values = {}
    if env_file is not None and env_file.exists():
        values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    values.update(os.environ if environ is None else environ)

    timeout_raw = values.get(f"{ENV_PREFIX}TIMEOUT_SEC", "20")
    try:
        timeout_sec = int(timeout_raw)
    except ValueError as e:
        raise SettingsError(f"{ENV_PREFIX}TIMEOUT_SEC must be an integer: {timeout_raw}") from e

    return Settings(
        base_url=values.get(f"{ENV_PREFIX}BASE_URL", ""),
        timeout_sec=timeout_sec,
        log_level=values.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO"),
        config_file=values.get(f"{ENV_PREFIX}CONFIG", ""),
    )
