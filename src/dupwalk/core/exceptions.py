"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/exceptions.py
Errors raised by the traversal engine.
"""
from typing import Optional


class ConfigError(ValueError):
    """Invalid walker configuration or an unusable root path."""


class WalkError(RuntimeError):
    """
    Fatal error raised by a directory or fingerprint task.
    The whole walk is aborted; no partial results are returned.
    """

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        reason = f"{type(cause).__name__}: {cause}" if cause is not None else "unknown error"
        super().__init__(f"Walk failed at {path}: {reason}")
