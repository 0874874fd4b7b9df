"""Type aliases used across the ABA generator."""

from __future__ import annotations

from typing import Any

RecordData = dict[str, Any]
TypeCode = str
