"""Protocol interfaces for pluggable generator collaborators.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Footer aggregation
# ---------------------------------------------------------------------------

@runtime_checkable
class ICreditClassifier(Protocol):
    """Decides which transaction codes count toward the footer credit total."""

    def is_credit(self, transaction_code: Any) -> bool: ...


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of the current moment for header dates left unspecified."""

    def __call__(self) -> datetime: ...
