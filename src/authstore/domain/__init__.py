"""Domain-level helpers for the identity store."""
