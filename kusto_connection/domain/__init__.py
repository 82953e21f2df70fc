"""Domain layer - connection descriptors and their parsing rules."""
