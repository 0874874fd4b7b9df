"""Schema and record models."""
