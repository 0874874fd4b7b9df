"""ABA generator exception hierarchy."""

from __future__ import annotations


class AbaError(Exception):
    """Base exception for all ABA generator errors."""


class EmptyInputError(AbaError):
    """No detail records were passed to generate()."""

    def __init__(self, message: str = "Please pass in at least one payment") -> None:
        super().__init__(message)


class SchemaError(AbaError):
    """A record schema is misconfigured."""


class SchemaOrderError(SchemaError):
    """A field starts before the end of the previously written field."""

    def __init__(self, field_name: str, start: int, cursor: int) -> None:
        self.field_name = field_name
        self.start = start
        self.cursor = cursor
        super().__init__(
            f"Custom schema error, please provide field boundaries in grow order: "
            f"field {field_name!r} starts at {start} but the line is already written up to {cursor}"
        )


class SchemaNotFoundError(SchemaError):
    """No schema registered for a record-type code."""

    def __init__(self, type_code: str) -> None:
        self.type_code = type_code
        super().__init__(f"No record schema registered for type code {type_code!r}")
