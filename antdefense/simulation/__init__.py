"""Game configuration and the turn loop."""
