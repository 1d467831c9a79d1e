# domain/suite.py
"""
Suite configuration: what every scenario's WebApiContext starts with.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class HttpDefaults:
    base_url: str = ""
    timeout_sec: Optional[int] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SuiteConfig:
    http: HttpDefaults = field(default_factory=HttpDefaults)
    placeholders: Dict[str, str] = field(default_factory=dict)
