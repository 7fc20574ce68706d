"""Shared utilities: logging setup and small cross-cutting helpers. No business logic."""
