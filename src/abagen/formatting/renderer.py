"""Line renderer: walks a record schema and concatenates rendered fields."""

from __future__ import annotations

from typing import Any, Mapping

from abagen.core.exceptions import SchemaOrderError
from abagen.formatting.codec import render_field
from abagen.models.schema import RecordSchema


def field_value(record: Mapping[str, Any], name: str) -> Any:
    """Look up a field, treating every falsy value as absent."""
    return record.get(name) or ""


def render_line(record: Mapping[str, Any], schema: RecordSchema) -> str:
    """Render one record as a fixed-width line.

    Gaps between consecutive fields are filled with spaces. The line ends at
    the last field's end boundary; schemas that need a fixed total width
    declare a trailing filler field.

    Raises:
        SchemaOrderError: a field starts before the end of the previous one.
    """
    parts: list[str] = []
    cursor = 0
    for spec in schema.fields:
        if spec.start < cursor:
            raise SchemaOrderError(spec.name, spec.start, cursor)
        parts.append(" " * (spec.start - cursor))
        parts.append(render_field(field_value(record, spec.name), spec))
        cursor = spec.end
    return "".join(parts)
