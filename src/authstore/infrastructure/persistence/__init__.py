"""Persistence implementations for the identity store."""
