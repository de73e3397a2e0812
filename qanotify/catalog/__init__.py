"""QA check catalog: per-check priority and description."""
