"""Ants, bees and the colony that owns them."""
