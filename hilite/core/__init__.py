"""Error taxonomy, configuration and shared fallback helpers."""
