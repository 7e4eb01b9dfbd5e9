"""Helpers for moving values in and out of JSON."""

from .convert_utils import ConvertUtils

__all__ = ["ConvertUtils"]
