"""Infrastructure layer - configuration and driving adapters."""
