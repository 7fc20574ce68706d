"""Persistence: async engine, ORM models, and read-only repositories."""
