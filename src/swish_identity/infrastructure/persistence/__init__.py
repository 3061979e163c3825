"""Persistence adapters for identities."""
