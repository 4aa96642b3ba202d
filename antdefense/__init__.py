"""Antdefense - a turn-based tunnel defense game engine."""
