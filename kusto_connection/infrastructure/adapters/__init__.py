"""Infrastructure adapters - Driving adapters exposing the use cases."""
