"""Library settings using pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from abagen.core.constants import CreditPolicy


class AbaSettings(BaseSettings):
    """Process-wide defaults, overridable through ``ABA_*`` environment variables.

    Only choices the file format leaves open live here. Resolved once when a
    generator is built; values given explicitly in a ``FormatterConfig``
    always take precedence.
    """

    model_config = {"env_prefix": "ABA_"}

    credit_policy: CreditPolicy = CreditPolicy.RANGE
    log_level: str = "INFO"
