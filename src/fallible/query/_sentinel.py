"""Marker for optional arguments where an explicit None is still an error."""

from typing import Any

MISSING: Any = object()
