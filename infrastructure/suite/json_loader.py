# infrastructure/suite/json_loader.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from infrastructure.suite.base_loader import SuiteLoadError, SuiteLoaderBase


class JsonSuiteLoader(SuiteLoaderBase):
    def _load_file(self, path: Path) -> Any:
        with path.open("r", encoding="utf-8") as handle:
            try:
                return json.load(handle)
            except json.JSONDecodeError as e:
                raise SuiteLoadError(f"Invalid JSON in {path} at line {e.lineno}: {e.msg}") from e
