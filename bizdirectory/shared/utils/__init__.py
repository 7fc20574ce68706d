"""Shared utility helpers."""

from bizdirectory.shared.utils.rating import round_rating

__all__ = ["round_rating"]
