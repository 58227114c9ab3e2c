"""Arena-facing adapters."""
