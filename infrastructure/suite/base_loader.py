# infrastructure/suite/base_loader.py
"""
Build a SuiteConfig from a decoded config document.

    http:
      base_url: http://localhost:8000
      timeout_sec: 5
      headers:
        User-Agent: webapi-steps
    placeholders:
      "{user}": bob
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from domain.suite import HttpDefaults, SuiteConfig


class SuiteLoadError(Exception):
    pass


class SuiteLoaderBase(ABC):
    def load_from_file(self, path: Union[str, Path]) -> SuiteConfig:
        p = Path(path)
        if not p.exists():
            raise SuiteLoadError(f"Suite config not found: {path}")

        try:
            data = self._load_file(p)
        except SuiteLoadError:
            raise
        except Exception as e:
            raise SuiteLoadError(f"Suite config can not be parsed: {path}: {e}") from e

        if data is None:
            return SuiteConfig()
        if not isinstance(data, dict):
            raise SuiteLoadError(f"Suite config must be a mapping: {path}")

        return self.load_from_dict(data)

    @abstractmethod
    def _load_file(self, path: Path) -> Any:
        ...

    def load_from_dict(self, data: Dict[str, Any]) -> SuiteConfig:
        http_data = data.get("http") or {}
        placeholders = data.get("placeholders") or {}
        if not isinstance(http_data, dict):
            raise SuiteLoadError("'http' must be a mapping")
        if not isinstance(placeholders, dict):
            raise SuiteLoadError("'placeholders' must be a mapping")

        return SuiteConfig(
            http=self._load_http(http_data),
            placeholders={str(k): str(v) for k, v in placeholders.items()},
        )

    def _load_http(self, data: Dict[str, Any]) -> HttpDefaults:
        timeout_sec = data.get("timeout_sec")
        if timeout_sec is not None:
            try:
                timeout_sec = int(timeout_sec)
            except (TypeError, ValueError) as e:
                raise SuiteLoadError(f"http.timeout_sec must be an integer: {timeout_sec}") from e

        return HttpDefaults(
            base_url=str(data.get("base_url") or ""),
            timeout_sec=timeout_sec,
            headers={str(k): str(v) for k, v in (data.get("headers") or {}).items()},
        )
