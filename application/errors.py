# application/errors.py
from __future__ import annotations

from typing import Any


class AssertionFailedError(AssertionError):
    """A response did not satisfy an expectation. This is a test failure."""


class MissingKeyError(AssertionFailedError):
    def __init__(self, key: Any):
        self.key = key
        super().__init__(f"Key \"{key}\" not found in response.")


class MalformedExpectedJsonError(ValueError):
    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Can not convert etalon to json:\n{raw}")


class ApiContextError(RuntimeError):
    pass
