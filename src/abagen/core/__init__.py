"""Settings, constants, errors and shared interfaces."""
