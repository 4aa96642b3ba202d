"""Tunnel places and the hive."""
