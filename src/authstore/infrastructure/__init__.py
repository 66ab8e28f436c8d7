"""Infrastructure adapters for the identity store."""
