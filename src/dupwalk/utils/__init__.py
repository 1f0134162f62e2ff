"""Small helpers shared by the CLI and the command layer."""

from .convert_utils import ConvertUtils

__all__ = ["ConvertUtils"]
