"""Fixed-width field and line rendering."""

from __future__ import annotations

from abagen.formatting.codec import render_field
from abagen.formatting.renderer import render_line

__all__ = ["render_field", "render_line"]
