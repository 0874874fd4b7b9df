"""Schema registry and record assembly."""
