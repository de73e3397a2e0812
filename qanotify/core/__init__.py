"""Settings, logging, constants and the error taxonomy."""
